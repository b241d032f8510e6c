"""Command line interface for the Pokedex keypad."""

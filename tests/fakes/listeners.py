"""Recording change listener for engine tests."""

from pokedex.input.multitap import InputState


class RecordingListener:
    """Collects every InputState snapshot passed to it."""

    def __init__(self):
        self.snapshots: list[InputState] = []

    def __call__(self, state: InputState) -> None:
        self.snapshots.append(state)

    @property
    def display_texts(self) -> list[str]:
        return [s.display_text for s in self.snapshots]

    @property
    def committed_texts(self) -> list[str]:
        return [s.committed_text for s in self.snapshots]

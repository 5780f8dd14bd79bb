"""Free-form notes buffer."""

from dataclasses import dataclass


@dataclass
class NotesBuffer:
    """A single notes string, replaced wholesale on every edit."""

    text: str = ""

    def replace(self, text: str) -> None:
        self.text = text

    def clear(self) -> None:
        self.text = ""

    @property
    def is_empty(self) -> bool:
        return not self.text.strip()

"""Read-only doctor and patient directories."""

from typing import Iterable, Iterator, Protocol

from pydantic import BaseModel


class DirectoryEntry(BaseModel):
    id: str
    name: str

    class Config:
        frozen = True


class Doctor(DirectoryEntry):
    specialty: str = ''


class Patient(DirectoryEntry):
    pass


class Directory(Protocol):
    """Lookup of display entries by opaque id. Unknown ids give ``None``."""

    def get(self, entry_id: str) -> DirectoryEntry | None:
        ...

    def __iter__(self) -> Iterator[DirectoryEntry]:
        ...


class InMemoryDirectory:
    def __init__(self, entries: Iterable[DirectoryEntry]):
        self._entries = {entry.id: entry for entry in entries}

    def get(self, entry_id: str) -> DirectoryEntry | None:
        return self._entries.get(str(entry_id).strip())

    def __iter__(self) -> Iterator[DirectoryEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


def display_name(directory: Directory, entry_id: str) -> str:
    entry = directory.get(entry_id)
    return entry.name if entry else ''


DEFAULT_DOCTORS = (
    Doctor(id='1', name='Dr. Sarah Smith', specialty='Cardiologist'),
    Doctor(id='2', name='Dr. John Doe', specialty='Pediatrician'),
    Doctor(id='3', name='Dr. Emily Brown', specialty='Neurologist'),
)

DEFAULT_PATIENTS = (
    Patient(id='1', name='James Wilson'),
    Patient(id='2', name='Maria Garcia'),
    Patient(id='3', name='Robert Johnson'),
)


def default_doctor_directory() -> InMemoryDirectory:
    return InMemoryDirectory(DEFAULT_DOCTORS)


def default_patient_directory() -> InMemoryDirectory:
    return InMemoryDirectory(DEFAULT_PATIENTS)

"""Host and option records produced by the SSH config parser."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, overload


@dataclass(frozen=True)
class Option:
    """A single ``Key Value`` directive inside a host block."""

    name: str
    value: str

    def to_dict(self) -> dict[str, str]:
        """Return the option as a plain mapping."""
        return {"name": self.name, "value": self.value}


@dataclass(frozen=True)
class Host:
    """A ``Host`` block and its options, in file order."""

    name: str
    options: tuple[Option, ...] = field(default_factory=tuple)

    def find_option(self, name: str) -> Option | None:
        """Find the first option with the given name.

        Args:
            name: Option name, compared exactly (e.g. "HostName")

        Returns:
            The first matching Option, or None if the host has no such option
        """
        for option in self.options:
            if option.name == name:
                return option
        return None

    def get(self, name: str, default: str | None = None) -> str | None:
        """Get the value of the first option with the given name."""
        option = self.find_option(name)
        if option is None:
            return default
        return option.value

    def to_dict(self) -> dict[str, Any]:
        """Return the host as a JSON-ready mapping."""
        return {
            "name": self.name,
            "options": [option.to_dict() for option in self.options],
        }


class Hosts(Sequence[Host]):
    """Ordered, immutable sequence of parsed hosts.

    Duplicate host names are kept as separate entries in the order
    they were encountered.
    """

    __slots__ = ("_hosts",)

    def __init__(self, hosts: Sequence[Host] = ()) -> None:
        self._hosts: tuple[Host, ...] = tuple(hosts)

    @overload
    def __getitem__(self, index: int) -> Host: ...

    @overload
    def __getitem__(self, index: slice) -> "Hosts": ...

    def __getitem__(self, index: int | slice) -> "Host | Hosts":
        if isinstance(index, slice):
            return Hosts(self._hosts[index])
        return self._hosts[index]

    def __len__(self) -> int:
        return len(self._hosts)

    def __iter__(self) -> Iterator[Host]:
        return iter(self._hosts)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Hosts):
            return self._hosts == other._hosts
        if isinstance(other, (list, tuple)):
            return self._hosts == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._hosts)

    def __repr__(self) -> str:
        return f"Hosts({list(self._hosts)!r})"

    def find_host(self, name: str) -> Host | None:
        """Find the first host with the given name.

        Args:
            name: Host name, compared exactly

        Returns:
            The first matching Host, or None if no host has that name
        """
        for host in self._hosts:
            if host.name == name:
                return host
        return None

    @property
    def names(self) -> list[str]:
        """Host names in file order (duplicates included)."""
        return [host.name for host in self._hosts]

    def to_list(self) -> list[dict[str, Any]]:
        """Return all hosts as JSON-ready mappings."""
        return [host.to_dict() for host in self._hosts]

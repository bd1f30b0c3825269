"""Tests for Host, Option and Hosts models."""

import dataclasses

import pytest

from sshconf_mcp.models import Host, Hosts, Option


@pytest.fixture
def host() -> Host:
    """A host with a handful of options."""
    return Host(
        name="testhost",
        options=(
            Option("HostName", "192.0.2.1"),
            Option("User", "myuser"),
            Option("IdentityFile", "~/.ssh/id_rsa"),
            Option("IdentityFile", "~/.ssh/id_ed25519"),
        ),
    )


def test_find_option_returns_first_match(host: Host) -> None:
    """find_option returns the first option with that name."""
    assert host.find_option("HostName") == Option("HostName", "192.0.2.1")
    assert host.find_option("IdentityFile") == Option("IdentityFile", "~/.ssh/id_rsa")


def test_find_option_missing_returns_none(host: Host) -> None:
    """find_option returns None for absent names, without raising."""
    assert host.find_option("Port") is None
    assert host.find_option("hostname") is None


def test_get_returns_value_or_default(host: Host) -> None:
    """get returns the value or the supplied default."""
    assert host.get("User") == "myuser"
    assert host.get("Port") is None
    assert host.get("Port", "22") == "22"


def test_records_are_immutable(host: Host) -> None:
    """Host and Option cannot be modified after construction."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        host.name = "other"  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        host.options[0].value = "x"  # type: ignore[misc]


def test_to_dict(host: Host) -> None:
    """to_dict produces JSON-ready data."""
    data = Host("a", (Option("User", "b"),)).to_dict()

    assert data == {"name": "a", "options": [{"name": "User", "value": "b"}]}


def test_find_host() -> None:
    """find_host returns the first host with the name, or None."""
    hosts = Hosts(
        [
            Host("testHost1", (Option("HostName", "192.0.2.1"),)),
            Host("testHost2", (Option("HostName", "192.0.2.2"),)),
            Host("testHost1", (Option("HostName", "192.0.2.3"),)),
        ]
    )

    assert hosts.find_host("testHost1") == Host("testHost1", (Option("HostName", "192.0.2.1"),))
    assert hosts.find_host("testHost3") is None


def test_hosts_sequence_behaviour() -> None:
    """Hosts behaves like an ordered read-only list."""
    hosts = Hosts([Host("a"), Host("b"), Host("c")])

    assert len(hosts) == 3
    assert hosts[0] == Host("a")
    assert hosts[-1] == Host("c")
    assert isinstance(hosts[1:], Hosts)
    assert hosts[1:].names == ["b", "c"]
    assert [h.name for h in hosts] == ["a", "b", "c"]
    assert Host("b") in hosts
    assert hosts == [Host("a"), Host("b"), Host("c")]
    assert hosts == Hosts([Host("a"), Host("b"), Host("c")])
    assert hosts != [Host("a")]


def test_empty_hosts() -> None:
    """An empty Hosts is falsy and equal to an empty list."""
    hosts = Hosts()

    assert not hosts
    assert hosts == []
    assert hosts.to_list() == []

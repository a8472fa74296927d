import socket
import time

import dns.name
import dns.resolver
import pytest

from cname_finder.errors import ResolverConfigError
from cname_finder.models import OutcomeKind
from cname_finder.resolver import DnsCnameResolver, classify_canonical


class FakeRdata:
    def __init__(self, target: str) -> None:
        self.target = dns.name.from_text(target)


class FakeStub:
    def __init__(self, *, answer: object = None, error: Exception | None = None) -> None:
        self._answer = answer
        self._error = error
        self.calls: list[tuple[str, str, float]] = []

    def resolve(self, qname: str, rdtype: str, lifetime: float) -> object:
        self.calls.append((qname, rdtype, lifetime))
        if self._error is not None:
            raise self._error
        return self._answer


def test_classify_canonical() -> None:
    assert classify_canonical("a.example", "a.example.").kind is OutcomeKind.NO_RECORD
    assert classify_canonical("A.Example", " a.example. ").kind is OutcomeKind.NO_RECORD
    outcome = classify_canonical("a.example", "target.example.")
    assert outcome.kind is OutcomeKind.SUCCESS
    assert outcome.target == "target.example"


def test_success_returns_normalized_target() -> None:
    stub = FakeStub(answer=[FakeRdata("target.example.")])
    outcome = DnsCnameResolver(stub).resolve("a.example", 2.5)  # type: ignore[arg-type]
    assert outcome.kind is OutcomeKind.SUCCESS
    assert outcome.target == "target.example"
    assert stub.calls == [("a.example", "CNAME", 2.5)]


def test_self_referencing_cname_is_no_record() -> None:
    stub = FakeStub(answer=[FakeRdata("a.example.")])
    outcome = DnsCnameResolver(stub).resolve("a.example", 1.0)  # type: ignore[arg-type]
    assert outcome.kind is OutcomeKind.NO_RECORD


@pytest.mark.parametrize(
    ("error", "kind"),
    [
        (dns.resolver.NXDOMAIN(), OutcomeKind.NOT_FOUND),
        (dns.exception.Timeout(), OutcomeKind.TIMEOUT),
        (dns.resolver.LifetimeTimeout(timeout=1.0, errors=[]), OutcomeKind.TIMEOUT),
        (dns.resolver.NoAnswer(), OutcomeKind.NO_RECORD),
        (dns.resolver.NoNameservers(), OutcomeKind.ERROR),
        (OSError("network unreachable"), OutcomeKind.ERROR),
    ],
)
def test_failures_are_classified(error: Exception, kind: OutcomeKind) -> None:
    outcome = DnsCnameResolver(FakeStub(error=error)).resolve("a.example", 1.0)  # type: ignore[arg-type]
    assert outcome.kind is kind


def test_other_error_carries_detail() -> None:
    stub = FakeStub(error=OSError("network unreachable"))
    outcome = DnsCnameResolver(stub).resolve("a.example", 1.0)  # type: ignore[arg-type]
    assert outcome.detail == "network unreachable"


def test_unresponsive_server_times_out_within_budget() -> None:
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as silent:
        silent.bind(("127.0.0.1", 0))
        stub = dns.resolver.Resolver(configure=False)
        stub.nameservers = ["127.0.0.1"]
        stub.port = silent.getsockname()[1]

        started = time.monotonic()
        outcome = DnsCnameResolver(stub).resolve("a.example", 0.5)
        elapsed = time.monotonic() - started

    assert outcome.kind is OutcomeKind.TIMEOUT
    assert elapsed < 0.5 + 1.5


def test_missing_system_configuration_raises_config_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_resolver() -> object:
        raise dns.resolver.NoResolverConfiguration("no nameservers")

    monkeypatch.setattr("cname_finder.resolver.dns.resolver.Resolver", fake_resolver)
    with pytest.raises(ResolverConfigError):
        DnsCnameResolver()

"""Single-hop CNAME lookups with dnspython."""

from __future__ import annotations

import dns.exception
import dns.resolver

from .errors import ResolverConfigError
from .models import ResolutionOutcome
from .validation import normalize


def classify_canonical(source: str, canonical: str) -> ResolutionOutcome:
    """Compare a returned canonical name against the name that was queried."""
    target = normalize(canonical)
    if target.lower() == normalize(source).lower():
        return ResolutionOutcome.no_record()
    return ResolutionOutcome.success(target)


class DnsCnameResolver:
    """CNAME resolver backed by a dnspython stub resolver.

    Each lookup is a single query attempt whose total lifetime is capped by the
    timeout passed to :meth:`resolve`; dnspython abandons it once that budget is
    spent. A name that exists without a CNAME is reported as ``NO_RECORD``,
    the same as a CNAME pointing back at the name itself.
    """

    def __init__(self, resolver: dns.resolver.Resolver | None = None) -> None:
        if resolver is None:
            try:
                resolver = dns.resolver.Resolver()
            except dns.resolver.NoResolverConfiguration as exc:
                raise ResolverConfigError(f"No usable DNS resolver configuration: {exc}") from exc
        self._resolver = resolver

    def resolve(self, name: str, timeout: float) -> ResolutionOutcome:
        try:
            answer = self._resolver.resolve(name, "CNAME", lifetime=timeout)
        except dns.resolver.NXDOMAIN:
            return ResolutionOutcome.not_found()
        except dns.exception.Timeout:
            return ResolutionOutcome.timeout()
        except dns.resolver.NoAnswer:
            return ResolutionOutcome.no_record()
        except (dns.exception.DNSException, OSError) as exc:
            return ResolutionOutcome.error(str(exc) or type(exc).__name__)
        return classify_canonical(name, answer[0].target.to_text())

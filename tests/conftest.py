#
# Pytest Fixtures
#

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Callable

# Third Party ----------------------------------------------------------------------------------------------------------
import pytest


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def make_domain() -> Callable[[int], str]:
    """Build a valid domain name of exactly the requested length, ending in '.com'."""

    def _make_domain(length: int, label_length: int = 63) -> str:
        labels = []
        remaining = length - len(".com")
        while remaining > 0:
            # Each label but the first costs one extra character for its dot
            size = min(label_length, remaining if not labels else remaining - 1)
            if labels:
                remaining -= 1
            labels.append("a" * size)
            remaining -= size
        domain = ".".join(labels) + ".com"
        assert len(domain) == length
        return domain

    return _make_domain


@pytest.fixture
def long_url() -> str:
    """A syntactically fine URL just past the 2083 character ceiling."""
    return "http://foobar.com/" + "f" * 2082

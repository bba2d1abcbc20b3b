"""Small utilities (ids, time)."""

from dnsportal.shared.utils.datetime import utc_now
from dnsportal.shared.utils.generators import generate_cuid

__all__ = ["generate_cuid", "utc_now"]

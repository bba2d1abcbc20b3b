"""dnsportal: user/admin authentication in front of a DNS-filtering provider's profile API."""

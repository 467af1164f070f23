"""Adapters – outbound integrations (HTTP transport, Stripe API)."""

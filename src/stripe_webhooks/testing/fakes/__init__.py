"""Testing fakes – in-memory doubles for remote and time ports."""
from stripe_webhooks.testing.fakes.sleeper import RecordingSleeper
from stripe_webhooks.testing.fakes.webhook_endpoints import (
    FakeStripeClient,
    InMemoryWebhookEndpoints,
    RecordedCall,
)

__all__ = [
    "FakeStripeClient",
    "InMemoryWebhookEndpoints",
    "RecordedCall",
    "RecordingSleeper",
]

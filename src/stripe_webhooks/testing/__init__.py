"""Testing – in-memory doubles for the Stripe API and the retry clock."""

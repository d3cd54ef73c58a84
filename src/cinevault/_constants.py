"""Internal constants shared across the library."""

# ------------------------------------------------------------------
# Persisted storage keys (one per store; never shared)
# ------------------------------------------------------------------

USER_KEY = "user"
PURCHASES_KEY = "purchasedMovies"
CART_KEY = "cart"


# ------------------------------------------------------------------
# Demo account
# ------------------------------------------------------------------

DEMO_EMAIL = "user@example.com"
DEMO_PASSWORD = "password"
DEMO_NAME = "Demo User"
DEMO_USER_ID = "1"

# ------------------------------------------------------------------
# Storefront defaults
# ------------------------------------------------------------------

#: Simulated round-trip for login/registration, in seconds.
AUTH_DELAY_SECONDS = 1.0
#: Simulated card processing time, in seconds.
PAYMENT_DELAY_SECONDS = 2.0
TAX_RATE = 0.10
#: Size of the "featured" and "new releases" rows.
HIGHLIGHT_COUNT = 4

"""Service token signatures: Slack, GitHub, Twilio, Stripe, Square, JWT, etc."""

from jsleak.patterns.models import PatternDefinition

SLACK_API_KEY = PatternDefinition(
    name="slack_api_key",
    pattern=r"xox.-[0-9]{12}-[0-9]{12}-[0-9a-zA-Z]{24}",
)

GITHUB_AUTH_TOKEN = PatternDefinition(
    name="github_auth_token",
    pattern=r"\b[0-9a-fA-F]{40}\b",
    description="Legacy 40-hex GitHub token. Shares its shape with SHA-1 digests.",
)

GITHUB_ACCESS_TOKEN = PatternDefinition(
    name="github_access_token",
    pattern=r"[a-zA-Z0-9_-]*:[a-zA-Z0-9_-]+@github\.com*",
    description="Credentials embedded in a github.com URL.",
)

INSTAGRAM_TOKEN = PatternDefinition(
    name="instagram_token",
    pattern=r"[0-9a-fA-F]{7}\.[0-9a-fA-F]{32}",
)

TWITTER_ACCESS_TOKEN = PatternDefinition(
    name="twitter_access_token",
    pattern=r"[1-9][0-9]+-[0-9a-zA-Z]{40}",
)

FACEBOOK_ACCESS_TOKEN = PatternDefinition(
    name="facebook_access_token",
    pattern=r"\bEAACEdEose0cBA[0-9A-Za-z]+\b",
)

AUTHORIZATION_BASIC = PatternDefinition(
    name="authorization_basic",
    pattern=r"basic\s+[a-zA-Z0-9=:_+/-]{20,}",
)

AUTHORIZATION_BEARER = PatternDefinition(
    name="authorization_bearer",
    pattern=r"bearer\s+[a-zA-Z0-9_.=:+/-]{20,}",
)

AUTHORIZATION_API = PatternDefinition(
    name="authorization_api",
    pattern=r"\bapi[_-]?key\s*[:=]\s*[a-zA-Z0-9_-]{20,}\b",
)

MAILGUN_API_KEY = PatternDefinition(
    name="mailgun_api_key",
    pattern=r"\bkey-[0-9a-zA-Z]{32}\b",
)

TWILIO_API_KEY = PatternDefinition(
    name="twilio_api_key",
    pattern=r"\bSK[0-9a-fA-F]{32}\b",
)

TWILIO_ACCOUNT_SID = PatternDefinition(
    name="twilio_account_sid",
    pattern=r"\bAC[a-zA-Z0-9_-]{32}\b",
)

TWILIO_APP_SID = PatternDefinition(
    name="twilio_app_sid",
    pattern=r"\bAP[a-zA-Z0-9_-]{32}\b",
)

PAYPAL_BRAINTREE_ACCESS_TOKEN = PatternDefinition(
    name="paypal_braintree_access_token",
    pattern=r"access_token\$production\$[0-9a-z]{16}\$[0-9a-f]{32}",
)

SQUARE_OAUTH_SECRET = PatternDefinition(
    name="square_oauth_secret",
    pattern=r"sq0csp-[0-9A-Za-z_-]{43}|sq0[a-z]{3}-[0-9A-Za-z_-]{22,43}",
)

SQUARE_ACCESS_TOKEN = PatternDefinition(
    name="square_access_token",
    pattern=r"sqOatp-[0-9A-Za-z_-]{22}|EAAA[a-zA-Z0-9]{60}",
)

STRIPE_STANDARD_API = PatternDefinition(
    name="stripe_standard_api",
    pattern=r"\bsk_live_[0-9a-zA-Z]{24}\b",
)

STRIPE_RESTRICTED_API = PatternDefinition(
    name="stripe_restricted_api",
    pattern=r"\brk_live_[0-9a-zA-Z]{24}\b",
)

JSON_WEB_TOKEN = PatternDefinition(
    name="json_web_token",
    pattern=r"\bey[A-Za-z0-9_-]{10,}\.ey[A-Za-z0-9_-]{10,}\.[A-Za-z0-9_-]{10,}\b",
    description="Three-segment JWT with base64url JSON header and payload.",
)

ALL_TOKEN_PATTERNS = [
    SLACK_API_KEY,
    GITHUB_AUTH_TOKEN,
    INSTAGRAM_TOKEN,
    TWITTER_ACCESS_TOKEN,
    FACEBOOK_ACCESS_TOKEN,
    AUTHORIZATION_BASIC,
    AUTHORIZATION_BEARER,
    AUTHORIZATION_API,
    MAILGUN_API_KEY,
    TWILIO_API_KEY,
    TWILIO_ACCOUNT_SID,
    TWILIO_APP_SID,
    PAYPAL_BRAINTREE_ACCESS_TOKEN,
    SQUARE_OAUTH_SECRET,
    SQUARE_ACCESS_TOKEN,
    STRIPE_STANDARD_API,
    STRIPE_RESTRICTED_API,
    GITHUB_ACCESS_TOKEN,
    JSON_WEB_TOKEN,
]

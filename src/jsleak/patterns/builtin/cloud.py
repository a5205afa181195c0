"""Google and Amazon cloud credential signatures."""

from jsleak.patterns.models import PatternDefinition

GOOGLE_API = PatternDefinition(
    name="google_api",
    pattern=r"\bAIza[0-9A-Za-z_-]{35}\b",
    description="Google API key (AIza prefix).",
)

GOOGLE_CAPTCHA = PatternDefinition(
    name="google_captcha",
    pattern=r"6L[0-9A-Za-z_-]{38}|^6[0-9a-zA-Z_-]{39}$",
    description="Google reCAPTCHA site/secret key.",
)

GOOGLE_OAUTH = PatternDefinition(
    name="google_oauth",
    pattern=r"ya29\.[0-9A-Za-z_-]+",
    description="Google OAuth access token (ya29. prefix).",
)

GOOGLE_CLOUD_PLATFORM_AUTH = PatternDefinition(
    name="google_cloud_platform_auth",
    pattern=r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}",
)

GOOGLE_CLOUD_PLATFORM_API = PatternDefinition(
    name="google_cloud_platform_api",
    pattern=r"[A-Za-z0-9_]{21}--[A-Za-z0-9_]{8}",
)

GMAIL_AUTH_TOKEN = PatternDefinition(
    name="gmail_auth_token",
    pattern=r"[0-9a-zA-Z_]{32}\.apps\.googleusercontent\.com",
    description="Google OAuth client ID.",
)

FIREBASE = PatternDefinition(
    name="firebase",
    pattern=r"\bAAAA[A-Za-z0-9_-]{7}:[A-Za-z0-9_-]{140}\b",
    description="Firebase Cloud Messaging server key.",
)

AMAZON_AWS_ACCESS_KEY_ID = PatternDefinition(
    name="amazon_aws_access_key_id",
    pattern=r"\bA[SK]IA[0-9A-Z]{16}\b",
    description="AWS access key ID (AKIA / ASIA prefix).",
)

AMAZON_SECRET_KEY = PatternDefinition(
    name="amazon_secret_key",
    pattern=r"\b[0-9a-zA-Z/+]{40}\b",
    description="AWS secret access key (40 base64 characters).",
)

AMAZON_MWS_AUTH_TOKEN = PatternDefinition(
    name="amazon_mws_auth_token",
    pattern=(
        r"amzn\.mws\.[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}"
        r"-[0-9a-f]{4}-[0-9a-f]{12}"
    ),
)

AMAZON_AWS_URL = PatternDefinition(
    name="amazon_aws_url",
    pattern=r"s3\.amazonaws\.com/+|[a-zA-Z0-9_-]*\.s3\.amazonaws\.com",
    description="S3 bucket URL.",
)

ALL_CLOUD_PATTERNS = [
    GOOGLE_API,
    GOOGLE_CLOUD_PLATFORM_AUTH,
    GOOGLE_CLOUD_PLATFORM_API,
    AMAZON_SECRET_KEY,
    GMAIL_AUTH_TOKEN,
    FIREBASE,
    GOOGLE_CAPTCHA,
    GOOGLE_OAUTH,
    AMAZON_AWS_ACCESS_KEY_ID,
    AMAZON_MWS_AUTH_TOKEN,
    AMAZON_AWS_URL,
]

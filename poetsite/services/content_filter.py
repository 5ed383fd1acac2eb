"""Link and contact-info detection for user comments."""

import re

_TLDS = (
    "com|org|net|io|co|dev|me|info|biz|xyz|app|site|online|store|blog|page|link|click|"
    "tk|ml|ga|cf|gq|top|live|pro|tech|website|space|fun|today|world|life|cloud|digital|"
    "solutions|studio|design|media|agency|works|center|zone|network|systems|services|"
    "group|plus|direct|news|tv|fm|am|edu|gov|mil|int|asia|africa|eu|us|uk|ca|au|in|cn|"
    "jp|de|fr|br|ru|id|my|sg|ph|vn|th|kr|tw|hk|bd|pk|lk|np|mm|kh|la"
)

CONTACT_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"https?://\S+", re.IGNORECASE),
    re.compile(r"www\.\S+", re.IGNORECASE),
    re.compile(rf"[a-z0-9][-a-z0-9]*\.({_TLDS})\b", re.IGNORECASE),
    re.compile(r"\b\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}\b"),
    # shorteners and messaging apps
    re.compile(r"t\.me/\S+", re.IGNORECASE),
    re.compile(r"wa\.me/\S+", re.IGNORECASE),
    re.compile(r"bit\.ly/\S+", re.IGNORECASE),
    re.compile(r"tinyurl\.com/\S+", re.IGNORECASE),
    re.compile(r"goo\.gl/\S+", re.IGNORECASE),
    re.compile(r"[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}", re.IGNORECASE),
)


def contains_contact_info(text: str) -> bool:
    """True if text carries a link, bare domain, IP address or email address."""
    return any(pattern.search(text) for pattern in CONTACT_PATTERNS)

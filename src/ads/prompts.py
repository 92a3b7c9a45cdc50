"""Prompt templates for ad copy generation."""

SYSTEM_PROMPT = "You are an AI that generates ad copy."

# (gender, age group) -> creative emphasis for that audience
AUDIENCE_EMPHASIS: dict[tuple[str, str], str] = {
    ("female", "9-18"): "Appeal to young girls with fun, color, and trendy designs.",
    ("female", "18-25"): "Emphasize style, comfort, and empowerment.",
    ("female", "25-40"): "Focus on comfort, elegance, and professional appeal.",
    ("female", "40-60"): "Emphasize comfort, sophistication, and practicality.",
    ("female", "60+"): "Highlight comfort, elegance, and relaxation.",
    ("male", "9-18"): "Appeal to young boys or teens with energy and coolness.",
    ("male", "18-25"): "Focus on style, confidence, and boldness.",
    ("male", "25-40"): "Emphasize practicality, style, and versatility.",
    ("male", "40-60"): "Appeal with quality, durability, and classic style.",
    ("male", "60+"): "Highlight comfort and ease of use.",
}

TARGETED_AD_PROMPT = """\
Generate an ad for the following product:
Brand: {brand_name}
Product: {product_name}
Description: {product_description}
Targeted at a {gender} audience in the age group of {age_group}.
{emphasis}"""

MANUAL_AD_PROMPT = """\
Generate an engaging ad for the following product:
Brand: {brand_name}
Product: {product_name}
Description: {product_description}
Target Audience: {target_audience}
Unique Selling Points: {unique_selling_points}"""


def audience_emphasis(gender: str | None, age_group: str | None) -> str:
    """Return the emphasis sentence for an audience, or "" if none is defined."""
    if not gender or not age_group:
        return ""
    return AUDIENCE_EMPHASIS.get((gender.lower(), age_group), "")


def format_targeted_prompt(
    brand_name: str,
    product_name: str,
    product_description: str,
    gender: str | None,
    age_group: str | None,
) -> str:
    """Build the /createAd prompt from scraped product data and the target audience."""
    return TARGETED_AD_PROMPT.format(
        brand_name=brand_name,
        product_name=product_name,
        product_description=product_description,
        gender=gender or "general",
        age_group=age_group or "all ages",
        emphasis=audience_emphasis(gender, age_group),
    ).rstrip()


def format_manual_prompt(
    brand_name: str,
    product_name: str,
    product_description: str,
    target_audience: str,
    unique_selling_points: str,
) -> str:
    """Build the /generateAdPrompt prompt from manually entered product details."""
    return MANUAL_AD_PROMPT.format(
        brand_name=brand_name,
        product_name=product_name,
        product_description=product_description,
        target_audience=target_audience,
        unique_selling_points=unique_selling_points,
    )

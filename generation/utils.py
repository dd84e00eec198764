"""
Generation Utilities

Post-processing applied to the parsed provider output.
"""

import logfire

from .models import MAILTO_SCHEME, GeneratedContent


def sanitize_mailto_link(link: str) -> str:
    """
    Return the link unchanged if it uses the mailto: scheme, else the bare scheme.

    Example:
        >>> sanitize_mailto_link("http://not-a-mailto")
        'mailto:'
    """
    if link.startswith(MAILTO_SCHEME):
        return link
    return MAILTO_SCHEME


def sanitize_content(content: GeneratedContent) -> GeneratedContent:
    """
    Repair the parsed content. The mailto link is the only field touched.

    Args:
        content: Content exactly as parsed from the provider

    Returns:
        The same content, or a copy with mailto_link reset to "mailto:"
    """
    link = content.client_email.mailto_link
    safe_link = sanitize_mailto_link(link)

    if safe_link == link:
        return content

    logfire.warning(
        "Discarding mailto link without mailto: scheme",
        link_prefix=link[:20]
    )

    email = content.client_email.model_copy(update={"mailto_link": safe_link})
    return content.model_copy(update={"client_email": email})

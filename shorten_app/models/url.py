from dataclasses import dataclass


@dataclass
class UrlRecord:
    """
    A stored short link.

    The Shortener owns every UrlRecord it creates. Callers only ever get
    copies, so mutating a returned record never touches the store.

    Attributes:
        short_id: Generated identifier appended to the domain.
        original_url: Destination URL exactly as it was submitted.
        short_url: Fully-qualified short link, `{domain}/{short_id}`.
        visit_count: Number of successful resolutions so far.
    """
    short_id: str
    original_url: str
    short_url: str
    visit_count: int = 0

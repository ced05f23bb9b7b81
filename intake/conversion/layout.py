from intake.conversion.models import PageLayout, Placement


def fit_to_page(width: int, height: int, page: PageLayout) -> Placement:
    """Scale an image down (never up) into the printable area and center it.

    One pixel maps to one point at scale 1.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Image dimensions must be positive, got {width}x{height}")
    scale = min(
        1.0,
        page.printable_width / width,
        page.printable_height / height,
    )
    scaled_width = width * scale
    scaled_height = height * scale
    return Placement(
        x=(page.width - scaled_width) / 2,
        y=(page.height - scaled_height) / 2,
        width=scaled_width,
        height=scaled_height,
        scale=scale,
    )

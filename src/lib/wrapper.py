"""
Document wrapper

Places a rendered body inside the static standalone HTML shell.
"""

LIVE_RELOAD_SCRIPT = """
<script>
    const es = new EventSource('/reload');
    es.onmessage = () => location.reload();
</script>
"""


def htmlDocument_build(body: str, title: str, style: str, live: bool = False) -> str:
    """
    Build complete HTML document around a rendered body

    Args:
        body: Output of the Block Renderer
        title: Document title (the input file path)
        style: Raw CSS, inserted unescaped into <style>
        live: Append the script that reloads the page on /reload events

    Returns:
        Complete HTML document
    """
    script = LIVE_RELOAD_SCRIPT if live else ""
    return (
        f"<!DOCTYPE html><head><style>{style}</style><title>{title}</title></head>"
        f"<body>{body}{script}</body>"
    )

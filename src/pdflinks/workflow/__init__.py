from pdflinks.workflow.collect import collect, find_links, write_links

__all__ = [
    "collect",
    "find_links",
    "write_links",
]

from pdflinks.domain.mappers.link_mapper import LinkMapper

__all__ = ["LinkMapper"]

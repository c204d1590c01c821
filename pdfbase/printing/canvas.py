"""
Canvas Helpers

Draws section headers and footers on every page.
"""

from typing import Callable, List

from reportlab.platypus import Frame, Flowable

from pdfbase.model import HeaderFooter, Section


# (elements, available_width, page_number) -> flowables
FlowableBuilder = Callable[[list, float, int], List[Flowable]]


def _draw_band(canvas, header_footer: HeaderFooter, build: FlowableBuilder,
               x: float, y: float, width: float, height: float) -> None:
    if header_footer.is_empty() or width <= 0 or height <= 0:
        return

    flowables = build(header_footer.elements, width, canvas.getPageNumber())
    frame = Frame(
        x, y, width, height,
        leftPadding=0,
        rightPadding=0,
        topPadding=0,
        bottomPadding=0,
        showBoundary=0,
    )
    # Content that does not fit the band is dropped
    frame.addFromList(flowables, canvas)


def draw_header(canvas, section: Section, build: FlowableBuilder) -> None:
    """
    Draw the section header between the header distance and the top margin.

    Args:
        canvas: ReportLab canvas object
        section: Section whose header is drawn
        build: Converts header elements into flowables
    """
    setup = section.page_setup
    _, page_height = setup.effective_page_size
    _draw_band(
        canvas,
        section.header,
        build,
        setup.left_margin,
        page_height - setup.top_margin,
        setup.content_width,
        setup.top_margin - setup.header_distance,
    )


def draw_footer(canvas, section: Section, build: FlowableBuilder) -> None:
    """
    Draw the section footer between the bottom margin and the footer distance.

    Args:
        canvas: ReportLab canvas object
        section: Section whose footer is drawn
        build: Converts footer elements into flowables
    """
    setup = section.page_setup
    _draw_band(
        canvas,
        section.footer,
        build,
        setup.left_margin,
        setup.footer_distance,
        setup.content_width,
        setup.bottom_margin - setup.footer_distance,
    )


def create_header_footer_function(section: Section, build: FlowableBuilder):
    """
    Create an onPage callback for a PageTemplate.

    Args:
        section: Section whose header and footer are drawn
        build: Converts header/footer elements into flowables

    Returns:
        Function that draws header and footer
    """
    def header_footer(canvas, doc):
        canvas.saveState()
        draw_header(canvas, section, build)
        draw_footer(canvas, section, build)
        canvas.restoreState()

    return header_footer

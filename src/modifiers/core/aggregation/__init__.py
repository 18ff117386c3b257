"""Modification aggregation: CSS rendering, attribute merging, sinks."""
from .aggregator import AggregationResult, ModificationAggregator, link_key
from .attributes import merge_attributes
from .css import render_css
from .sink import AttachmentSink, HeadTag, RenderAttachments

__all__ = [
    "AggregationResult",
    "AttachmentSink",
    "HeadTag",
    "ModificationAggregator",
    "RenderAttachments",
    "link_key",
    "merge_attributes",
    "render_css",
]

# markplus/markdown/preprocessors/__init__.py

from .code_blocks import split_code_blocks
from .color_tags import process_color_tags
from .container_tags import process_ltr_tags, process_mono_tags, process_rtl_tags
from .video_tags import process_video_tags

PREPROCESSORS = [
    process_color_tags,  # Must run before containers so their content is tag-shaped
    process_video_tags,
    process_rtl_tags,  # Containers re-enter the renderer for their content
    process_ltr_tags,
    process_mono_tags,
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text


def apply_outside_code(text, context):
    """Apply the preprocessors to every segment that is not a code block"""
    return "".join(
        segment.text if segment.is_code else apply_preprocessors(segment.text, context)
        for segment in split_code_blocks(text)
    )

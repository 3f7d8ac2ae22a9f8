# markplus/markdown/styles.py

STYLE_TEMPLATE = """<style>
.video-responsive {{
    position: relative;
    padding-bottom: 56.25%;
    height: 0;
    overflow: hidden;
    max-width: 100%;
    background: #000;
}}
.video-responsive iframe {{
    position: absolute;
    top: 0;
    left: 0;
    width: 100%;
    height: 100%;
}}
.rtl, .rtl * {{
    direction: rtl;
    unicode-bidi: isolate;
    text-align: right;
}}
.ltr, .ltr * {{
    direction: ltr;
    unicode-bidi: isolate;
    text-align: left;
}}
.mono {{
    font-family: {monospace_font};
}}
</style>

"""


def build_style_block(monospace_font: str) -> str:
    """Return the <style> block prepended to a renderer's first output."""
    return STYLE_TEMPLATE.format(monospace_font=monospace_font)

"""
Form Components - Password Field
================================
The input has a 1px outline in the normal state.
When the dynamic property error="true" is set, outline and label turn danger.
Focus thickens the outline to 2px without changing its colour, so the
normal/error colour stays readable while typing.
"""

from constants import ObjectNames
from ..spacing import Spacing
from ..border_radius import BorderRadius


def get_styles(theme):
    """Generate password field styles"""
    c = theme.colors
    t = theme.sizes

    label_small = t["label_small"]

    BORDER_NORMAL = f"1px solid {c['content_xx_high']}"
    BORDER_ERROR = f"1px solid {c['content_danger']}"

    # padding absorbs the 1px -> 2px focus border so the text does not move
    PAD_NORMAL = f"{Spacing.px('xs')} {Spacing.px('s')}"
    PAD_FOCUS = f"{Spacing.XS - 1}px {Spacing.S - 1}px"

    return f"""
    /* =======================================================================
       Password input
    ======================================================================= */

    QLineEdit#{ObjectNames.INPUT} {{
        background    : {c["bg_input"]};
        color         : {c["content_xx_high"]};
        border        : {BORDER_NORMAL};
        border-radius : {BorderRadius.INPUT};
        padding       : {PAD_NORMAL};
        font-size     : {t["body_medium"].size}px;
    }}

    QLineEdit#{ObjectNames.INPUT}:focus {{
        border-width : 2px;
        padding      : {PAD_FOCUS};
    }}

    QLineEdit#{ObjectNames.INPUT}[error="true"] {{
        border     : {BORDER_ERROR};
        background : {c["bg_input_error"]};
    }}

    QLineEdit#{ObjectNames.INPUT}[error="true"]:focus {{
        border-width : 2px;
    }}

    /* =======================================================================
       Labels
    ======================================================================= */

    QLabel#{ObjectNames.STATUS} {{
        font-size   : {label_small.size}px;
        font-weight : 800;
        color       : {c["content_xx_high"]};
    }}

    QLabel#{ObjectNames.LABEL} {{
        font-size   : {label_small.size}px;
        font-weight : 800;
        color       : {c["content_xx_high"]};
    }}

    QLabel#{ObjectNames.LABEL}[error="true"] {{
        color : {c["content_danger"]};
    }}

    QLabel#{ObjectNames.LABEL_OPTIONAL} {{
        font-size   : {label_small.size}px;
        font-weight : {label_small.weight};
        color       : {c["content_high"]};
    }}

    QLabel#{ObjectNames.RULE_HINT} {{
        font-size   : {label_small.size}px;
        font-weight : {label_small.weight};
        color       : {c["content_warning"]};
    }}
    """

"""Registry of special forms for the minilisp evaluator.

Maps head tokens to handler functions. The evaluator consumes the head token
and hands it, together with the Cursor and Environment, to the handler; the
handler reads the rest of the form including its closing paren.
"""

from minilisp.reader.lexer import RESERVED, Token
from minilisp.evaluation.special_forms.arithmetic_forms import arithmetic_form
from minilisp.evaluation.special_forms.comparison_forms import comparison_form
from minilisp.evaluation.special_forms.if_form import if_form
from minilisp.evaluation.special_forms.setq_form import setq_form
from minilisp.evaluation.special_forms.defun_form import defun_form

SPECIAL_FORMS = {
    RESERVED["+"]: arithmetic_form,
    RESERVED["-"]: arithmetic_form,
    RESERVED["*"]: arithmetic_form,
    RESERVED["/"]: arithmetic_form,
    RESERVED["="]: comparison_form,
    RESERVED["/="]: comparison_form,
    RESERVED["<"]: comparison_form,
    RESERVED["<="]: comparison_form,
    RESERVED[">"]: comparison_form,
    RESERVED[">="]: comparison_form,
    RESERVED["if"]: if_form,
    Token("symbol", "setq"): setq_form,
    Token("symbol", "defun"): defun_form,
}

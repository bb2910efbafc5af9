"""Registry of special forms for the Glisp evaluator.

Maps bare symbol names to handlers. Every handler has the signature
`handler(exp, env, evaluate_fn, save_eval)` where `exp` is the whole form
(head included). A handler returns either a final value or a TailCall telling
the evaluator loop which expression to continue with, and in which env.
"""

from glisp.evaluation.special_forms.def_form import def_form
from glisp.evaluation.special_forms.let_form import let_form
from glisp.evaluation.special_forms.quote_forms import quote_form, quasiquote_form
from glisp.evaluation.special_forms.macro_forms import macro_form, macroexpand_form
from glisp.evaluation.special_forms.try_form import try_form
from glisp.evaluation.special_forms.do_form import do_form
from glisp.evaluation.special_forms.if_form import if_form
from glisp.evaluation.special_forms.fn_form import fn_form
from glisp.evaluation.special_forms.eval_form import eval_when_execute_form
from glisp.evaluation.special_forms.env_forms import env_chain_form, which_env_form

SPECIAL_FORMS = {
    "def": def_form,
    "let": let_form,
    "quote": quote_form,
    "quasiquote": quasiquote_form,
    "macro": macro_form,
    "macroexpand": macroexpand_form,
    "try": try_form,
    "do": do_form,
    "if": if_form,
    "fn": fn_form,
    "eval-when-execute": eval_when_execute_form,
    "env-chain": env_chain_form,
    "which-env": which_env_form,
}

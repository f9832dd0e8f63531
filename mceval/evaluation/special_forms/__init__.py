"""Registry of special forms for the mceval evaluator.

`build_special_forms` returns a fresh registry holding the built-in forms.
The evaluator consults it before treating a compound form as an ordinary
application. `SPECIAL_FORMS` is the registry used when none is passed in.
"""

from __future__ import annotations

from mceval.evaluation.registry import SpecialFormRegistry
from mceval.evaluation.special_forms.quote_form import quote_form
from mceval.evaluation.special_forms.define_form import define_form
from mceval.evaluation.special_forms.if_form import if_form
from mceval.evaluation.special_forms.set_form import set_form
from mceval.evaluation.special_forms.lambda_form import lambda_form
from mceval.evaluation.special_forms.begin_form import begin_form
from mceval.evaluation.special_forms.cond_form import cond_form
from mceval.evaluation.special_forms.load_form import make_load_form
from mceval.evaluation.special_forms.binding_forms import (
    defined_form,
    locally_defined_form,
    make_unbound_form,
    locally_make_unbound_form,
)
from mceval.modules.source_loader import FileLoader, SourceLoader


def build_special_forms(loader: SourceLoader | None = None) -> SpecialFormRegistry:
    forms = SpecialFormRegistry()
    forms.register("quote", quote_form)
    forms.register("define", define_form)
    forms.register("if", if_form)
    forms.register("set!", set_form)
    forms.register("lambda", lambda_form)
    forms.register("begin", begin_form)
    forms.register("cond", cond_form)
    forms.register("load", make_load_form(loader or FileLoader()))
    forms.register("defined?", defined_form)
    forms.register("locally-defined?", locally_defined_form)
    forms.register("make-unbound!", make_unbound_form)
    forms.register("locally-make-unbound!", locally_make_unbound_form)
    return forms


SPECIAL_FORMS = build_special_forms()

"""Calculator forms"""
from duecalc.core import OVERDUE, SETTLEMENT
from duecalc.core.pipeline import build_form_class

OverdueForm = build_form_class(OVERDUE)
SettlementForm = build_form_class(SETTLEMENT)

FORMS = {
    OVERDUE.name: OverdueForm,
    SETTLEMENT.name: SettlementForm,
}


def form_for(name, **kwargs):
    """Bind the form of the named calculator to the current request"""
    return FORMS[name](**kwargs)

"""Generic calculator pipeline: normalize, validate, compute.

A calculator is described once by a ``CalculatorSpec``; the web form, the
live validation and the calculation all derive from it.
"""
from dataclasses import asdict, dataclass, field
from functools import lru_cache
from typing import Any, Callable, Dict, Optional, Tuple

from flask_wtf import FlaskForm
from werkzeug.datastructures import MultiDict
from wtforms import Form, StringField


@dataclass(frozen=True)
class FieldSpec:
    """One input of a calculator form"""
    name: str
    label: str
    normalizer: Callable[[Optional[str]], str]
    parser: Callable[[Any], Any]
    validators: Tuple[Any, ...]
    placeholder: str = ''
    input_mode: str = 'numeric'
    icon: str = ''


@dataclass(frozen=True)
class ResultRow:
    """One line of the result card"""
    label: str
    attribute: str
    highlight: bool = False
    icon: str = ''


@dataclass(frozen=True)
class CalculatorSpec:
    name: str
    title: str
    description: str
    nav_label: str
    fields: Tuple[FieldSpec, ...]
    input_type: type
    result_type: type
    compute: Callable[..., Any]
    result_rows: Tuple[ResultRow, ...]

    @property
    def field_names(self):
        return [spec_field.name for spec_field in self.fields]


@dataclass(frozen=True)
class Validation:
    """Outcome of validating one set of calculator values"""
    values: Dict[str, str]
    errors: Dict[str, str] = field(default_factory=dict)
    accepted: Any = None

    @property
    def is_valid(self):
        return self.accepted is not None


@lru_cache(maxsize=None)
def build_form_class(spec, base=FlaskForm):
    """Create the WTForms form class for a calculator.

    Each field runs its normalizer as an input filter, so the value rendered
    back into the input is the normalized one.
    """
    attrs = {}
    for spec_field in spec.fields:
        attrs[spec_field.name] = StringField(
            spec_field.label,
            validators=list(spec_field.validators),
            filters=[spec_field.normalizer],
            render_kw={
                'placeholder': spec_field.placeholder,
                'inputmode': spec_field.input_mode,
                'autocomplete': 'off',
            },
        )
    class_name = ''.join(part.capitalize() for part in spec.name.split('_')) + 'Form'
    return type(class_name, (base,), attrs)


def validation_from_form(spec, form, form_valid):
    """Collect a validated form into a ``Validation``"""
    values = {name: form[name].data or '' for name in spec.field_names}
    errors = {name: messages[0] for name, messages in form.errors.items() if messages}
    if not form_valid or errors:
        return Validation(values=values, errors=errors)

    parsed = {spec_field.name: spec_field.parser(values[spec_field.name])
              for spec_field in spec.fields}
    return Validation(values=values, accepted=spec.input_type(**parsed))


def validate(spec, values):
    """Normalize and validate raw calculator values.

    Args:
        spec: The calculator to validate for
        values: Mapping of field name to raw value; missing fields count as
            empty

    Returns:
        Validation holding the normalized values and either the validated
        input record or the first error message of every failing field
    """
    formdata = MultiDict()
    for name in spec.field_names:
        raw = values.get(name)
        formdata[name] = '' if raw is None else str(raw)
    form = build_form_class(spec, Form)(formdata=formdata)
    return validation_from_form(spec, form, form.validate())


def calculate(spec, validated_input):
    """Apply the calculation engine to a validated input record"""
    return spec.compute(**asdict(validated_input))


class CalculatorState:
    """Result currently shown by one calculator form.

    ``render_key`` grows by one on every successful submission so the view can
    replay the result card animation.
    """

    def __init__(self, spec, result=None, render_key=0):
        self.spec = spec
        self.result = result
        self.render_key = render_key

    def submit(self, validation):
        """Replace the result when the submission is valid.

        A rejected submission leaves the previous result in place.
        """
        if not validation.is_valid:
            return False
        self.result = calculate(self.spec, validation.accepted)
        self.render_key += 1
        return True

    def to_dict(self):
        return {
            'result': asdict(self.result) if self.result is not None else None,
            'render_key': self.render_key,
        }

    @classmethod
    def from_dict(cls, spec, data):
        if not data:
            return cls(spec)
        result = data.get('result')
        try:
            result = spec.result_type(**result) if result else None
        except TypeError:
            # Stored by an older result layout
            result = None
        return cls(spec, result=result, render_key=int(data.get('render_key') or 0))

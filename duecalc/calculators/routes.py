"""Calculator routes"""
from dataclasses import asdict

from flask import abort, current_app, flash, jsonify, render_template, request, session

from duecalc.calculators import calculators_bp
from duecalc.calculators.forms import form_for
from duecalc.core import get_calculator, validate
from duecalc.core.pipeline import CalculatorState, calculate, validation_from_form
from duecalc.utils.helpers import format_result


def _lookup(name):
    try:
        return get_calculator(name)
    except KeyError:
        abort(404)


def _session_key(spec):
    return f'calculator.{spec.name}'


def _request_values():
    """Values posted as a JSON object or as a regular form"""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def _render_calculator(name):
    spec = _lookup(name)
    form = form_for(name)

    if request.method == 'GET':
        # A freshly opened form starts without a result
        session.pop(_session_key(spec), None)
        state = CalculatorState(spec)
    else:
        state = CalculatorState.from_dict(spec, session.get(_session_key(spec)))
        validation = validation_from_form(spec, form, form.validate_on_submit())
        if state.submit(validation):
            session[_session_key(spec)] = state.to_dict()
            current_app.logger.info('%s calculation completed', spec.name)
            flash('Đã tính toán xong.', 'success')
        else:
            current_app.logger.debug('%s submission rejected: %s',
                                     spec.name, ', '.join(sorted(validation.errors)))
            flash('Vui lòng kiểm tra lại thông tin đã nhập.', 'warning')

    return render_template('calculators/calculator.html',
                           title=spec.title,
                           spec=spec,
                           form=form,
                           state=state)


@calculators_bp.route('/', methods=['GET', 'POST'])
def overdue():
    """Overdue amount calculator"""
    return _render_calculator('overdue')


@calculators_bp.route('/settlement', methods=['GET', 'POST'])
def settlement():
    """Settlement amount calculator"""
    return _render_calculator('settlement')


@calculators_bp.route('/<name>/validate', methods=['POST'])
def validate_fields(name):
    """Normalize and validate field values as they are typed"""
    spec = _lookup(name)
    validation = validate(spec, _request_values())
    return jsonify({
        'values': validation.values,
        'errors': validation.errors,
        'valid': validation.is_valid,
    })


@calculators_bp.route('/<name>/calculate', methods=['POST'])
def calculate_result(name):
    """Validate and calculate in one call"""
    spec = _lookup(name)
    validation = validate(spec, _request_values())
    if not validation.is_valid:
        return jsonify({'values': validation.values, 'errors': validation.errors}), 422

    result = calculate(spec, validation.accepted)
    current_app.logger.info('%s calculation completed', spec.name)
    return jsonify({
        'values': validation.values,
        'result': asdict(result),
        'formatted': format_result(spec, result),
    })

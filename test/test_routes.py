"""
Tests for the calculator pages and JSON endpoints
"""
from duecalc.core.calculators import (
    AMOUNT_REQUIRED, DAYS_NOT_POSITIVE, DAYS_REQUIRED, PERCENTAGE_INVALID,
)

NBSP = '\u00a0'
RESULT_TITLE = 'Chi Tiết Kết Quả'


def test_overdue_page(client):
    response = client.get('/')
    assert response.status_code == 200
    page = response.get_data(as_text=True)
    assert 'Tính Tiền Quá Hạn' in page
    assert 'name="due_amount"' in page
    assert 'name="overdue_days"' in page
    assert RESULT_TITLE not in page


def test_settlement_page(client):
    response = client.get('/settlement')
    assert response.status_code == 200
    page = response.get_data(as_text=True)
    assert 'Tính Tiền Tất Toán' in page
    assert 'inputmode="decimal"' in page


def test_navigation_links_both_calculators(client):
    page = client.get('/settlement').get_data(as_text=True)
    assert 'href="/"' in page
    assert 'href="/settlement"' in page


def test_submit_overdue(client):
    response = client.post('/', data={'due_amount': '1,000,000', 'overdue_days': '5'})
    assert response.status_code == 200
    page = response.get_data(as_text=True)
    assert RESULT_TITLE in page
    assert f'10.990{NBSP}₫' in page
    assert f'16.485{NBSP}₫' in page
    assert f'82.425{NBSP}₫' in page
    assert 'Đã tính toán xong.' in page


def test_submit_settlement(client):
    response = client.post('/settlement', data={'principal_amount': '10,000,000',
                                                'settlement_percentage': '30'})
    page = response.get_data(as_text=True)
    assert f'3.000.000{NBSP}₫' in page


def test_submit_renders_normalized_input(client):
    page = client.post('/', data={'due_amount': 'abc1,0a00', 'overdue_days': '5'}).get_data(as_text=True)
    assert 'value="1,000"' in page


def test_rejected_submit_shows_field_errors(client):
    page = client.post('/', data={'due_amount': '', 'overdue_days': '0'}).get_data(as_text=True)
    assert AMOUNT_REQUIRED in page
    assert DAYS_NOT_POSITIVE in page
    assert RESULT_TITLE not in page


def test_rejected_submit_keeps_previous_result(client):
    client.post('/', data={'due_amount': '1,000,000', 'overdue_days': '5'})
    page = client.post('/', data={'due_amount': '1,000,000', 'overdue_days': ''}).get_data(as_text=True)
    assert DAYS_REQUIRED in page
    assert f'82.425{NBSP}₫' in page


def test_reopening_form_clears_result(client):
    client.post('/', data={'due_amount': '1,000,000', 'overdue_days': '5'})
    page = client.get('/').get_data(as_text=True)
    assert RESULT_TITLE not in page


def test_calculators_do_not_share_results(client):
    client.post('/', data={'due_amount': '1,000,000', 'overdue_days': '5'})
    page = client.post('/settlement', data={'principal_amount': '',
                                            'settlement_percentage': ''}).get_data(as_text=True)
    assert RESULT_TITLE not in page


def test_live_validation(client):
    response = client.post('/overdue/validate', json={'due_amount': '1000000x', 'overdue_days': ''})
    assert response.status_code == 200
    payload = response.get_json()
    assert payload['values'] == {'due_amount': '1,000,000', 'overdue_days': ''}
    assert payload['errors'] == {'overdue_days': DAYS_REQUIRED}
    assert payload['valid'] is False


def test_live_validation_accepts_form_data(client):
    response = client.post('/settlement/validate',
                           data={'principal_amount': '5000', 'settlement_percentage': '1.2.3'})
    payload = response.get_json()
    assert payload['values']['principal_amount'] == '5,000'
    assert payload['errors'] == {'settlement_percentage': PERCENTAGE_INVALID}


def test_calculate_endpoint(client):
    response = client.post('/settlement/calculate',
                           json={'principal_amount': '10,000,000', 'settlement_percentage': '30'})
    assert response.status_code == 200
    payload = response.get_json()
    assert payload['result'] == {'settlement_amount': 3000000}
    assert payload['formatted'] == {'settlement_amount': f'3.000.000{NBSP}₫'}


def test_calculate_endpoint_at_largest_accepted_values(client):
    response = client.post('/overdue/calculate', json={'due_amount': '9,007,199,254,740,991',
                                                    'overdue_days': '9007199254740991'})
    assert response.status_code == 200
    result = response.get_json()['result']
    assert result['total_overdue'] == result['overdue_per_day'] * 9007199254740991


def test_submit_at_largest_accepted_values(client):
    response = client.post('/', data={'due_amount': '9,007,199,254,740,991',
                                     'overdue_days': '9007199254740991'})
    assert response.status_code == 200
    assert RESULT_TITLE in response.get_data(as_text=True)


def test_calculate_endpoint_rejects_invalid_values(client):
    response = client.post('/overdue/calculate', json={'due_amount': '0', 'overdue_days': '5'})
    assert response.status_code == 422
    assert 'due_amount' in response.get_json()['errors']


def test_unknown_calculator(client):
    assert client.post('/interest/validate', json={}).status_code == 404
    response = client.get('/interest')
    assert response.status_code == 404
    assert 'Không tìm thấy trang' in response.get_data(as_text=True)

from dataclasses import replace

import pytest

from availability import AvailabilityGate
from config import Settings
from conftest import FixedClock


@pytest.fixture
def gate_settings():
    return Settings(active_start_hour=8, active_end_hour=20)


@pytest.mark.parametrize('path', [
    '/script.js',
    '/style.css',
    '/favicon.ico',
    '/admin',
    '/admin/anything',
    '/',
    '/api/status',
])
def test_exempt_paths(path):
    assert AvailabilityGate.is_exempt(path)


@pytest.mark.parametrize('path', ['/api/validate', '/api/records/123', '/other'])
def test_protected_paths(path):
    assert not AvailabilityGate.is_exempt(path)


@pytest.mark.parametrize('hour,expected', [
    (7, False), (8, True), (14, True), (20, True), (21, False), (0, False),
])
def test_active_hours_inclusive(gate_settings, hour, expected):
    gate = AvailabilityGate(gate_settings, clock=FixedClock(hour))
    assert gate.is_within_active_hours(hour) is expected
    assert (gate.check('/api/validate') is None) is expected


def test_maintenance_wins_over_active_hours(gate_settings):
    gate = AvailabilityGate(replace(gate_settings, maintenance_mode=True), clock=FixedClock(12))
    blocked = gate.check('/api/records/1')
    assert blocked['status'] == 'maintenance'
    assert blocked['maintenanceMode'] is True
    assert 'currentHour' not in blocked


def test_outside_hours_payload(gate_settings):
    gate = AvailabilityGate(
        replace(gate_settings, active_message='Closed for the night'),
        clock=FixedClock(22)
    )
    assert gate.check('/api/validate') == {
        'success': False,
        'message': 'Closed for the night',
        'maintenanceMode': False,
        'status': 'outside_hours',
        'currentHour': 22,
        'activeHours': '8:00 - 20:00'
    }


def test_exempt_paths_pass_during_maintenance(gate_settings):
    gate = AvailabilityGate(replace(gate_settings, maintenance_mode=True), clock=FixedClock(3))
    assert gate.check('/admin') is None
    assert gate.check('/script.js') is None


@pytest.mark.parametrize('maintenance,hour,status', [
    (True, 12, 'maintenance'),
    (True, 2, 'maintenance'),
    (False, 12, 'active'),
    (False, 2, 'outside_hours'),
])
def test_status_payload(gate_settings, maintenance, hour, status):
    gate = AvailabilityGate(replace(gate_settings, maintenance_mode=maintenance), clock=FixedClock(hour))
    payload = gate.status_payload()
    assert payload['status'] == status
    assert payload['currentHour'] == hour
    assert payload['maintenanceMode'] is maintenance
    assert payload['activeHours'] == {'start': 8, 'end': 20}

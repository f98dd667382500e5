"""Tests for the release update check (GitHub API is mocked)."""

from unittest import mock

import pytest
import requests

from services.updates import check_for_updates, compare_versions, select_asset_url

RELEASE = {
    'tag_name': 'v1.2.0',
    'html_url': 'https://github.com/ohjey/batched-app/releases/tag/v1.2.0',
    'assets': [
        {'name': 'Batched-1.2.0-arm64.dmg', 'browser_download_url': 'https://example.com/mac.dmg'},
        {'name': 'Batched-Setup-1.2.0.exe', 'browser_download_url': 'https://example.com/win.exe'},
    ],
}


def response(status_code=200, payload=None):
    resp = mock.Mock(status_code=status_code)
    resp.json.return_value = payload
    if status_code >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f'{status_code} Error')
    return resp


@pytest.mark.parametrize('v1, v2, expected', [
    ('1.2.0', '1.1.9', 1),
    ('1.2', '1.2.0', 0),
    ('v1.0.0', '1.0.0', 0),
    ('1.0.9', '1.0.10', -1),
])
def test_compare_versions(v1, v2, expected):
    assert compare_versions(v1, v2) == expected


def test_select_asset_url():
    assert select_asset_url(RELEASE, 'darwin') == 'https://example.com/mac.dmg'
    assert select_asset_url(RELEASE, 'win32') == 'https://example.com/win.exe'
    # No linux asset: fall back to the release page
    assert select_asset_url(RELEASE, 'linux') == RELEASE['html_url']


@mock.patch('services.updates.requests.get')
def test_update_available(mock_get):
    mock_get.return_value = response(payload=RELEASE)

    result = check_for_updates('1.0.0', 'ohjey/batched-app', platform='darwin')

    assert result.ok is True
    assert result.update_available is True
    assert result.latest_version == '1.2.0'
    assert result.download_url == 'https://example.com/mac.dmg'
    url = mock_get.call_args.args[0]
    assert url == 'https://api.github.com/repos/ohjey/batched-app/releases/latest'


@mock.patch('services.updates.requests.get')
def test_up_to_date(mock_get):
    mock_get.return_value = response(payload=RELEASE)
    result = check_for_updates('1.2.0', 'ohjey/batched-app')
    assert result.ok is True
    assert result.update_available is False
    assert result.download_url is None


@mock.patch('services.updates.requests.get')
def test_no_releases(mock_get):
    mock_get.return_value = response(status_code=404)
    result = check_for_updates('1.0.0', 'ohjey/batched-app')
    assert result.ok is False
    assert result.error == 'No releases found'


@mock.patch('services.updates.requests.get')
def test_server_error(mock_get):
    mock_get.return_value = response(status_code=500)
    result = check_for_updates('1.0.0', 'ohjey/batched-app')
    assert result.ok is False
    assert '500' in result.error


@mock.patch('services.updates.requests.get', side_effect=requests.ConnectionError('offline'))
def test_network_error(mock_get):
    result = check_for_updates('1.0.0', 'ohjey/batched-app')
    assert result.ok is False
    assert result.error == 'offline'
    assert result.to_dict()['current_version'] == '1.0.0'

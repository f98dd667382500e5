"""
Update Check Service

Compares the running version with the latest GitHub release and picks
the download for this platform. Nothing is downloaded or installed.
"""

import logging
import sys
from dataclasses import dataclass

import requests

logger = logging.getLogger(__name__)

GITHUB_API = 'https://api.github.com/repos/{repo}/releases/latest'

# Asset name markers per platform, checked in order
PLATFORM_ASSET_MARKERS = {
    'darwin': ('.dmg', 'mac', 'darwin'),
    'win32': ('.exe', 'win'),
    'linux': ('.appimage', 'linux'),
}


@dataclass
class UpdateCheck:
    ok: bool
    current_version: str
    latest_version: str = None
    update_available: bool = False
    download_url: str = None
    release_url: str = None
    error: str = None

    def to_dict(self):
        return {
            'ok': self.ok,
            'current_version': self.current_version,
            'latest_version': self.latest_version,
            'update_available': self.update_available,
            'download_url': self.download_url,
            'release_url': self.release_url,
            'error': self.error,
        }


def _version_parts(version):
    parts = []
    for part in version.strip().lstrip('v').split('.'):
        try:
            parts.append(int(part))
        except ValueError:
            parts.append(0)
    return parts


def compare_versions(v1, v2):
    """Return 1, 0 or -1. '1.2' == '1.2.0', a leading 'v' is ignored."""
    p1 = _version_parts(v1)
    p2 = _version_parts(v2)
    length = max(len(p1), len(p2))
    p1 += [0] * (length - len(p1))
    p2 += [0] * (length - len(p2))
    if p1 > p2:
        return 1
    if p1 < p2:
        return -1
    return 0


def select_asset_url(release, platform=None):
    """
    Download URL of the release asset for this platform.

    Falls back to the release page when no asset matches, so the caller
    always has somewhere to send the user.
    """
    platform = platform or sys.platform
    markers = PLATFORM_ASSET_MARKERS.get(platform, ())
    assets = release.get('assets') or []

    for marker in markers:
        for asset in assets:
            if marker in asset.get('name', '').lower():
                return asset.get('browser_download_url')

    return release.get('html_url')


def check_for_updates(current_version, repo, platform=None, timeout=10):
    """Ask GitHub for the latest release of `repo` ("owner/name")."""
    url = GITHUB_API.format(repo=repo)
    headers = {
        'User-Agent': 'Batched-App',
        'Accept': 'application/vnd.github.v3+json',
    }

    try:
        response = requests.get(url, headers=headers, timeout=timeout)
        if response.status_code == 404:
            return UpdateCheck(ok=False, current_version=current_version, error='No releases found')
        response.raise_for_status()
        release = response.json()
    except (requests.RequestException, ValueError) as e:
        logger.warning("Update check failed: %s", e)
        return UpdateCheck(ok=False, current_version=current_version, error=str(e))

    latest_version = (release.get('tag_name') or '').lstrip('v')
    if not latest_version:
        return UpdateCheck(ok=False, current_version=current_version, error='Release has no version tag')

    if compare_versions(latest_version, current_version) <= 0:
        return UpdateCheck(ok=True, current_version=current_version, latest_version=latest_version,
                           release_url=release.get('html_url'))

    logger.info("Update available: %s -> %s", current_version, latest_version)
    return UpdateCheck(
        ok=True,
        current_version=current_version,
        latest_version=latest_version,
        update_available=True,
        download_url=select_asset_url(release, platform),
        release_url=release.get('html_url'),
    )

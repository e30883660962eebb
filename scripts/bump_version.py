#!/usr/bin/env python3
import argparse
import os
import re
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
PYPROJECT = ROOT / 'pyproject.toml'
PACKAGE_INIT = ROOT / 'puresig' / '__init__.py'

_PYPROJECT_VERSION_RE = re.compile(r'^version = "([^"]+)"', re.MULTILINE)
_INIT_VERSION_RE = re.compile(r'^__version__ = "([^"]+)"', re.MULTILINE)


def bump_version(current: str, bump_type: str) -> str:
    major, minor, patch = map(int, current.split('.'))
    if bump_type == 'major':
        return f"{major + 1}.0.0"
    if bump_type == 'minor':
        return f"{major}.{minor + 1}.0"
    if bump_type == 'patch':
        return f"{major}.{minor}.{patch + 1}"
    raise ValueError(f"Invalid bump type: {bump_type}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Bump the puresig version.')
    parser.add_argument('bump_type', choices=['major', 'minor', 'patch'])
    parser.add_argument('--dry-run', action='store_true', help='print the new version without writing files')
    args = parser.parse_args(argv)

    targets = [
        (PYPROJECT, _PYPROJECT_VERSION_RE, 'version = "{}"'),
        (PACKAGE_INIT, _INIT_VERSION_RE, '__version__ = "{}"'),
    ]
    contents = []
    # Check every file before writing any of them.
    for path, pattern, _ in targets:
        content = path.read_text()
        if not pattern.search(content):
            print(f"Error: Could not find version in {path.name}", file=sys.stderr)
            return 1
        contents.append(content)

    current_version = _PYPROJECT_VERSION_RE.search(contents[0]).group(1)
    new_version = bump_version(current_version, args.bump_type)

    if not args.dry_run:
        for (path, pattern, template), content in zip(targets, contents):
            path.write_text(pattern.sub(template.format(new_version), content, count=1))

    # Output for GitHub Actions
    github_output = os.environ.get('GITHUB_OUTPUT')
    if github_output:
        with open(github_output, 'a') as f:
            f.write(f"current_version={current_version}\n")
            f.write(f"new_version={new_version}\n")
    else:
        print(f"Bumped version: {current_version} -> {new_version}")
    return 0


if __name__ == '__main__':
    sys.exit(main())

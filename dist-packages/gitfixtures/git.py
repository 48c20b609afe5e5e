#
# This file is part of the LibreOffice project.
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
#

"""
Throwaway git repositories for release tests.

Every function checks the shape of its arguments with gitfixtures.checks
before running git, so a malformed call raises ValidationError and never
touches the filesystem. Failures of git itself surface as the
sh.ErrorReturnCode raised by sh and are not caught here.
"""

import logging
import os
import pathlib
import sh
import tempfile

from gitfixtures import checks

log = logging.getLogger(__name__)

GIT_ENV = 'GITFIXTURES_GIT'
DEFAULT_BRANCH = 'master'
DEFAULT_REMOTE = 'origin'
DEFAULT_USER_NAME = 'Foo Bar'
DEFAULT_USER_EMAIL = 'email@foo.bar'

def command(cwd):
    """Return git baked to run without a pager inside cwd."""
    return sh.Command(os.environ.get(GIT_ENV, 'git')).bake('--no-pager', _cwd=cwd, _tty_out=False)

def _run(cwd, *args):
    log.debug('git %s (in %s)', ' '.join(args), cwd)
    return str(command(cwd)(*args)).strip()

def _config_value(value):
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)

# init

def init(branch=DEFAULT_BRANCH):
    """Create a repository in a new temporary directory and return its path.

    The repository starts on `branch`, has commit signing disabled and a
    local committer identity, so commits work regardless of global config.
    """
    checks.kebab('branch', branch)
    cwd = tempfile.mkdtemp()
    _run(cwd, 'init')
    _run(cwd, 'checkout', '-b', branch)
    set_config(cwd, 'commit.gpgsign', False)
    set_user(cwd)
    log.info('initialized repository %s on branch %s', cwd, branch)
    return cwd

def init_remote():
    """Create a bare repository in a new temporary directory and return its file URL."""
    cwd = tempfile.mkdtemp()
    _run(cwd, 'init', '--bare')
    url = pathlib.Path(cwd).as_uri()
    log.info('initialized bare remote %s', url)
    return url

def init_origin(cwd, release_branch=None):
    """
    Create a bare remote, register it as origin of cwd and push all branches.

    If release_branch is given it is created from the current branch first,
    and the current branch is checked out again before pushing.
    """
    cwd = checks.absolute('cwd', cwd)
    checks.optional(checks.lower, 'release_branch', release_branch)
    url = init_remote()
    _run(cwd, 'remote', 'add', DEFAULT_REMOTE, url)
    if release_branch:
        current = current_branch(cwd)
        _run(cwd, 'checkout', '-b', release_branch)
        _run(cwd, 'checkout', current)
    _run(cwd, 'push', '--all', DEFAULT_REMOTE)
    return url

# add

def add(cwd, file='.'):
    cwd = checks.absolute('cwd', cwd)
    checks.nonempty('file', file)
    _run(cwd, 'add', file)

# commits

def commit(cwd, message):
    """Commit whatever is staged (possibly nothing) and return the new HEAD hash."""
    cwd = checks.absolute('cwd', cwd)
    checks.nonempty('message', message)
    _run(cwd, 'commit', '-m', message, '--no-gpg-sign', '--allow-empty')
    return get_head(cwd)

def commit_all(cwd, message):
    """`git add .` followed by commit()."""
    cwd = checks.absolute('cwd', cwd)
    checks.nonempty('message', message)
    add(cwd)
    return commit(cwd, message)

# push

def push(cwd, remote=DEFAULT_REMOTE, branch=DEFAULT_BRANCH):
    """Push HEAD and all tags to `branch` on `remote` (a remote name or URL)."""
    cwd = checks.absolute('cwd', cwd)
    checks.string('remote', remote)
    checks.lower('branch', branch)
    _run(cwd, 'push', '--tags', remote, 'HEAD:%s' % branch)

def set_user(cwd, name=DEFAULT_USER_NAME, email=DEFAULT_USER_EMAIL):
    cwd = checks.absolute('cwd', cwd)
    checks.nonempty('name', name)
    checks.nonempty('email', email)
    _run(cwd, 'config', '--local', 'user.email', email)
    _run(cwd, 'config', '--local', 'user.name', name)

# branches

def branch(cwd, branch):
    cwd = checks.absolute('cwd', cwd)
    checks.lower('branch', branch)
    _run(cwd, 'branch', branch)

def checkout(cwd, branch):
    cwd = checks.absolute('cwd', cwd)
    checks.lower('branch', branch)
    _run(cwd, 'checkout', branch)

def current_branch(cwd):
    # symbolic-ref also answers on an unborn branch, rev-parse does not
    cwd = checks.absolute('cwd', cwd)
    return _run(cwd, 'symbolic-ref', '--short', 'HEAD')

# hashes

def get_head(cwd):
    cwd = checks.absolute('cwd', cwd)
    return _run(cwd, 'rev-parse', 'HEAD')

# tags

def tag(cwd, tag_name, hash=None):
    """
    Tag HEAD as tag_name, or tag the commit `hash` if one is given.

    Tagging an explicit commit moves an existing tag of the same name.
    """
    cwd = checks.absolute('cwd', cwd)
    checks.nonempty('tag_name', tag_name)
    checks.optional(checks.commit_hash, 'hash', hash)
    if hash:
        _run(cwd, 'tag', '-f', tag_name, hash)
    else:
        _run(cwd, 'tag', tag_name)

def get_tags(cwd, hash):
    """Return the tag pointing exactly at hash; git fails if there is none."""
    cwd = checks.absolute('cwd', cwd)
    checks.commit_hash('hash', hash)
    return _run(cwd, 'describe', '--tags', '--exact-match', hash)

def get_tag_hash(cwd, tag_name):
    cwd = checks.absolute('cwd', cwd)
    checks.nonempty('tag_name', tag_name)
    return _run(cwd, 'rev-list', '-1', tag_name)

# config

def set_config(cwd, name, value):
    cwd = checks.absolute('cwd', cwd)
    checks.nonempty('name', name)
    _run(cwd, 'config', '--add', name, _config_value(value))

def get_config(cwd, name):
    cwd = checks.absolute('cwd', cwd)
    checks.nonempty('name', name)
    return _run(cwd, 'config', name)

# log

def get_log(cwd, number, hash):
    """Return the raw `git log` output for the last `number` commits of hash (a commit or branch)."""
    cwd = checks.absolute('cwd', cwd)
    checks.integer('number', number)
    checks.nonempty('hash', hash)
    return _run(cwd, 'log', '-%d' % number, hash)
# vim: set et sw=4 ts=4:

#! /usr/bin/env python3
#
# This file is part of the LibreOffice project.
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
#

# vim: set et sw=4 ts=4:
import sh
import urllib.parse
import urllib.request

import gitfixtures.git

def url_to_path(url):
    return urllib.request.url2pathname(urllib.parse.urlparse(url).path)

def createTestRepo(release_branch='next'):
    testdir = gitfixtures.git.init()
    git = gitfixtures.git.command(testdir)
    touch = sh.touch.bake(_cwd=testdir)
    for commit in range(0,6):
        touch('commit%d' % commit)
        gitfixtures.git.add(testdir, 'commit%d' % commit)
        gitfixtures.git.commit(testdir, 'feat: commit %d' % commit)
        if commit == 1:
            gitfixtures.git.tag(testdir, 'v1.0.0')
        elif commit == 3:
            gitfixtures.git.tag(testdir, 'v1.1.0')
    gitfixtures.git.branch(testdir, release_branch)
    gitfixtures.git.checkout(testdir, release_branch)
    for commit in range(6,8):
        touch('%s%d' % (release_branch, commit))
        gitfixtures.git.commit_all(testdir, 'fix: %s %d' % (release_branch, commit))
    gitfixtures.git.tag(testdir, 'v1.1.1-%s.1' % release_branch)
    gitfixtures.git.checkout(testdir, 'master')
    return (testdir, git)

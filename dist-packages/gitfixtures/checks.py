#
# This file is part of the LibreOffice project.
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
#

"""Argument shape rules applied before any git command is run."""

import os
import re

KEBAB = re.compile(r'^[a-z0-9]+(-[a-z0-9]+)*$')
HASH = re.compile(r'^[0-9a-fA-F]{40}$')

class ValidationError(ValueError):
    def __init__(self, name, rule, value):
        self.name = name
        self.rule = rule
        self.value = value
        super(ValidationError, self).__init__('%s: must be %s (got %r)' % (name, rule, value))

def string(name, value):
    if not isinstance(value, str):
        raise ValidationError(name, 'a string', value)
    return value

def nonempty(name, value):
    if not isinstance(value, str) or not value:
        raise ValidationError(name, 'a non-empty string', value)
    return value

def absolute(name, value):
    try:
        path = os.fspath(value)
    except TypeError:
        raise ValidationError(name, 'an absolute path', value)
    if not isinstance(path, str) or not os.path.isabs(path):
        raise ValidationError(name, 'an absolute path', value)
    return path

def lower(name, value):
    if not isinstance(value, str) or not value or value != value.lower():
        raise ValidationError(name, 'a lowercase string', value)
    return value

def kebab(name, value):
    if not isinstance(value, str) or not KEBAB.match(value):
        raise ValidationError(name, 'a kebab-case string', value)
    return value

def commit_hash(name, value):
    if not isinstance(value, str) or not HASH.match(value):
        raise ValidationError(name, 'a 40 character hex commit hash', value)
    return value

def integer(name, value):
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(name, 'an integer', value)
    return value

def optional(check, name, value):
    if value is None:
        return None
    return check(name, value)
# vim: set et sw=4 ts=4:

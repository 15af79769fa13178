# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import Counter

from .log import EditScriptFormatError


class EditEntry(dict):
    """For internal usage in querydiff library.

    Minimal class providing attribute access to edit entry keys.

    Being a plain dict underneath, a script of entries can be
    passed to json.dump directly as long as the tokens can.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        self[name] = value


class EditOp:
    "Collection of valid values for the op field in edit entries."
    KEEP = "keep"
    INSERT = "insert"
    DELETE = "delete"

    ALL = (KEEP, INSERT, DELETE)


def op_keep(a_index, b_index, token):
    "Create an edit entry passing A[a_index] == B[b_index] through."
    return EditEntry(op=EditOp.KEEP, a_index=a_index, b_index=b_index, token=token)

def op_insert(b_index, token):
    "Create an edit entry inserting B[b_index]."
    return EditEntry(op=EditOp.INSERT, a_index=None, b_index=b_index, token=token)

def op_delete(a_index, token):
    "Create an edit entry deleting A[a_index]."
    return EditEntry(op=EditOp.DELETE, a_index=a_index, b_index=None, token=token)


class EditScriptBuilder(object):
    """Build an edit script left to right, tracking positions in A and B."""

    def __init__(self):
        self._script = []
        self.x = 0
        self.y = 0

    def validated(self):
        return self._script

    def keep(self, a, n=1):
        for i in range(n):
            self._script.append(op_keep(self.x, self.y, a[self.x]))
            self.x += 1
            self.y += 1

    def insert(self, b, n=1):
        for i in range(n):
            self._script.append(op_insert(self.y, b[self.y]))
            self.y += 1

    def delete(self, a, n=1):
        for i in range(n):
            self._script.append(op_delete(self.x, a[self.x]))
            self.x += 1


def count_ops(script):
    "Return a Counter with the number of entries for each op."
    counts = Counter({op: 0 for op in EditOp.ALL})
    counts.update(e.op for e in script)
    return counts


def edit_distance(script):
    "Number of inserts and deletes in script."
    return sum(1 for e in script if e.op != EditOp.KEEP)


def is_valid_script(script):
    """Checks whether a script (list of edit entries) is well formed.

    Returns a boolean indicating the well-formedness of the script.
    """
    try:
        validate_script(script)
    except EditScriptFormatError:
        return False
    return True


def validate_script(script):
    """Check whether a script (list of edit entries) is well formed.

    Entries must have a known op, and the indices into A and B must
    count up from zero without gaps, in the order the entries appear.

    Raises an EditScriptFormatError if not well formed.
    """
    if not isinstance(script, list):
        raise EditScriptFormatError("Edit script must be a list.")
    x = 0
    y = 0
    for e in script:
        validate_edit_entry(e)
        if e.op in (EditOp.KEEP, EditOp.DELETE):
            if e.a_index != x:
                raise EditScriptFormatError(
                    "Entry {} expected at position {} of A.".format(e, x))
            x += 1
        if e.op in (EditOp.KEEP, EditOp.INSERT):
            if e.b_index != y:
                raise EditScriptFormatError(
                    "Entry {} expected at position {} of B.".format(e, y))
            y += 1


def validate_edit_entry(e):
    """Check that e is a well formed edit entry.

    Raises an EditScriptFormatError if not well formed.
    """
    if not isinstance(e, EditEntry):
        raise EditScriptFormatError("Edit entry '{}' is not an edit entry type.".format(e))
    for key in ("op", "a_index", "b_index", "token"):
        if key not in e:
            raise EditScriptFormatError("Edit entry '{}' is missing '{}'.".format(e, key))

    op = e.op
    if op == EditOp.KEEP:
        if not (isinstance(e.a_index, int) and isinstance(e.b_index, int)):
            raise EditScriptFormatError(
                "keep expects integer positions in both A and B, not '{}'.".format(e))
    elif op == EditOp.INSERT:
        if e.a_index is not None or not isinstance(e.b_index, int):
            raise EditScriptFormatError(
                "insert expects a position in B only, not '{}'.".format(e))
    elif op == EditOp.DELETE:
        if e.b_index is not None or not isinstance(e.a_index, int):
            raise EditScriptFormatError(
                "delete expects a position in A only, not '{}'.".format(e))
    else:
        raise EditScriptFormatError("Unknown edit op '{}'.".format(op))


def to_edit_script(obj):
    "Convert plain dicts, e.g. as loaded from json, to a list of edit entries."
    if not isinstance(obj, list):
        raise EditScriptFormatError("Edit script must be a list.")
    for e in obj:
        if not isinstance(e, dict):
            raise EditScriptFormatError("Edit entry '{}' is not a mapping.".format(e))
    script = [EditEntry(e) for e in obj]
    validate_script(script)
    return script

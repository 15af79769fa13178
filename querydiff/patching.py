# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .edit_format import EditOp, op_keep, op_insert, op_delete
from .log import EditScriptFormatError


__all__ = ["apply_script", "source_of", "target_of", "invert_script"]


def _as_type_of(obj, items):
    if isinstance(obj, str):
        return "".join(items)
    return items


def apply_script(obj, script):
    """Produce the sequence that script transforms obj into.

    Keep entries take the item from obj, delete entries skip it and insert
    entries splice in their token. Every item of obj must be accounted for,
    in order, by a keep or delete entry.

    Strings are patched to strings, any other sequence to a list.
    """
    newobj = []
    # Index into obj, the next item to take or skip
    take = 0
    for e in script:
        op = e.op
        if op == EditOp.INSERT:
            newobj.append(e.token)
            continue
        elif op not in (EditOp.KEEP, EditOp.DELETE):
            raise EditScriptFormatError("Invalid op {}.".format(op))

        if e.a_index != take:
            raise EditScriptFormatError(
                "Entry {} does not match position {} of the patched sequence.".format(e, take))
        if take >= len(obj):
            raise EditScriptFormatError(
                "Entry {} is past the end of the patched sequence.".format(e))
        if op == EditOp.KEEP:
            newobj.append(obj[take])
        take += 1

    if take != len(obj):
        raise EditScriptFormatError(
            "Script accounts for {} of {} items.".format(take, len(obj)))
    return _as_type_of(obj, newobj)


def source_of(script):
    "Recover the list of items the script was computed from."
    return [e.token for e in script if e.op != EditOp.INSERT]


def target_of(script):
    "Recover the list of items the script produces."
    return [e.token for e in script if e.op != EditOp.DELETE]


def invert_script(script):
    """Turn the script from a to b into a script from b to a.

    Inserts become deletes and vice versa, with the index roles swapped.
    Keep tokens are taken from a, which matters only for compare
    predicates that are looser than ==.
    """
    inverted = []
    for e in script:
        if e.op == EditOp.KEEP:
            inverted.append(op_keep(e.b_index, e.a_index, e.token))
        elif e.op == EditOp.INSERT:
            inverted.append(op_delete(e.b_index, e.token))
        elif e.op == EditOp.DELETE:
            inverted.append(op_insert(e.a_index, e.token))
        else:
            raise EditScriptFormatError("Invalid op {}.".format(e.op))
    return inverted

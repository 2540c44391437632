#!/usr/bin/env python
# -*- coding: utf-8 -*-


import ast


def parse_python_assigns(assign_str):
    """
    Parses a string of assignment statements into a dictionary.

    .. code-block:: python

        data = parse_python_assigns("grid_size=2048.0; "
                                    "synthetic_sources=True; "
                                    "vis_file='out.txt'")

        assert data == {
            'grid_size': 2048.0,
            'synthetic_sources': True,
            'vis_file': 'out.txt',
        }

    Parameters
    ----------
    assign_str: str
        Assignment string. Should only contain statements
        assigning python literals to variable names,
        separated by semi-colons.

    Returns
    -------
    dict
        Dictionary { name: value } containing
        assignment results.
    """
    if not assign_str:
        return {}

    try:
        stmts = ast.parse(assign_str, mode='exec').body
    except SyntaxError as e:
        raise ValueError("'%s' is not a valid assignment string: %s"
                         % (assign_str, e))

    variables = {}

    for i, stmt in enumerate(stmts):
        if not isinstance(stmt, ast.Assign):
            raise ValueError("Statement %d in '%s' is not a "
                             "variable assignment." % (i, assign_str))

        try:
            value = ast.literal_eval(stmt.value)
        except ValueError:
            raise ValueError("Statement %d in '%s' does not assign "
                             "a python literal." % (i, assign_str))

        # "a = b = 1" assigns 1 to both 'a' and 'b'
        for target in stmt.targets:
            if not isinstance(target, ast.Name):
                raise TypeError("'%s' types are not supported "
                                "as assignment targets." % type(target))

            variables[target.id] = value

    return variables

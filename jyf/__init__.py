# Core type aliases for jyf's data model.
# Parsed programs are trees of the node classes in jyf.types.nodes; string and
# number literals are stored as plain Python str/int/float and evaluate to
# themselves. Runtime values are ordinary Python objects: evaluated lists are
# Python lists, callables are Function, Macro or any Python callable.
#
# Naming guidance:
# - JyfNode:  Use in reader/parser code to denote syntax.
# - JyfValue: Use in evaluator/runtime code to denote evaluated values.

from typing import Any

# Runtime value alias
JyfValue = Any
# Syntax alias (nodes, or literal host values)
JyfNode = Any

# Call stack: list of jyf.types.callables.Frame, innermost last
CallStack = list

# lispy: a small Lisp-family language over S-expressions and Q-expressions.
#
# Runtime values are represented with plain Python objects where possible:
# - numbers are floats
# - S-expressions / Q-expressions are list subclasses (SExpr / QExpr)
# - symbols, errors, builtins and closures are small slot classes
# See lispy.types.value for the Value union and helpers shared by the core.

__version__ = "0.1.0"

# bgcheck

Building blocks for checking bigraphical reactive systems: place-graph
terms, reaction rules, a canonical string form for comparing terms, and a
small property-query language with pluggable predicates.

## Installation

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## What is inside

- `bgcheck.report`: diagnostic messages of the form `[module] message`.
  `report(level, module, message)` writes the line to standard output for
  `Level.INFO` and to standard error for `Level.WARN` and `Level.FATAL`, and
  returns it; `info`, `warning` and `error` are shorthands.
- `bgcheck.terms`: the term tree. `Control` (name, activity, arity) is the
  kind of a node; `Prefix(control, ports, suffix)` nests a suffix under a
  control and raises `TermError` when more ports are linked than the arity
  allows. `Hole(index)` is a numbered site, `Nil()` the empty term and
  `Num(value)` an integer literal. Every term has `to_string()`, `size()`,
  `children()`, `walk()` (breadth first), `flatten()`,
  `active_context()`, `overlap(other)`, `instantiate(match)`,
  `apply_match(match)` and `accept(visitor)`. `TermVisitor` visits terms
  innermost first; `ConsistencyVisitor` raises `TermError` when a sub-term
  object is shared within one term.
- `bgcheck.composite`: `Parallel(terms)`, a parallel composition whose
  `flatten()` drops nil children and splices nested parallels into it, and
  `Regions(terms)`, an ordered list of roots printed with `||`.
- `bgcheck.reactionrule`: `ReactionRule(redex, reactum, name="")` with
  `to_string()`, `causes(rule)` to record causation, and `contextify()`,
  which adds a shared context hole (printed `$ctx`) to a parallel redex that
  has no hole, and to its reactum.
- `bgcheck.subtree`: `ordered_string(term)`, a canonical pre-order string
  that is the same for terms differing only in the order of parallel
  children; `preorder_string` (a list of `Element`) and `format_ports` are
  the parts it is made of.
- `bgcheck.query`: property queries checked against a `State` (a root term,
  a `terminal` flag, a `parent` state and a list of `successors`).
  `BinaryQuery(lhs, op, rhs)` with an `Operator`, `NotQuery`,
  `PredicateQuery(name, params)`, `ScopeQuery(name, query)` for `this`,
  `terminal`, `pred` and `succ`, and the values `NumValue`, `TermValue` and
  `IdValue` (`true`/`false`). Predicates are registered by name with
  `register_predicate` and looked up with `get_predicate`. Ill-typed or
  unknown parts of a property raise `QueryError`.
- `bgcheck.predicates`: the standard predicates `empty`, `equal`, `size`
  and `terminal`; `register_defaults()` registers them all. It must be
  called before a `PredicateQuery` names one of them.

## Example

    from bgcheck.terms import Control, Prefix, Nil
    from bgcheck.composite import Parallel
    from bgcheck.subtree import ordered_string
    from bgcheck.query import BinaryQuery, NumValue, Operator, PredicateQuery, State
    from bgcheck.predicates import register_defaults

    a = Control("a", active=True, arity=0)
    b = Control("b", active=True, arity=0)

    left = Parallel([Prefix(a, [], Nil()), Prefix(b, [], Nil())])
    right = Parallel([Prefix(b, [], Nil()), Prefix(a, [], Nil())])

    assert ordered_string(left) == ordered_string(right)
    print(left.size())  # 2

    register_defaults()
    query = BinaryQuery(PredicateQuery("size"), Operator.EQ, NumValue(2))
    print(query.check(State(left)))  # True

## What it does not do

The package has no reader for model files, no command-line program, no
matcher that finds occurrences of a redex in a term, and no exploration of
the reaction graph. `instantiate` and `apply_match` take a match object
supplied by the caller, which must provide `root`, `rule`,
`get_param(index)` and `get_name(port)`; the package itself does not
produce such objects. States for queries are built by the caller.
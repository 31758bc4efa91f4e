import sys
from decimal import Decimal

from swisp.interpreter import Interpreter
from swisp.types.symbol import Symbol


def test_tail_recursive_count_down_runs_one_million_iterations():
    """A self tail-recursive loop must not grow the host stack."""
    interp = Interpreter()
    interp.eval("(define count (lambda (n) (if (= n 0) (quote done) (count (- n 1)))))")
    assert interp.eval("(count 1000000)") == [Symbol("done")]


def test_tail_recursion_deeper_than_host_recursion_limit():
    interp = Interpreter()
    depth = sys.getrecursionlimit() * 10
    interp.eval("(define sum (lambda (n acc) (if (= n 0) acc (sum (- n 1) (+ acc n)))))")
    assert interp.eval(f"(sum {depth} 0)") == Decimal(depth * (depth + 1) // 2)


def test_mutual_tail_recursion():
    interp = Interpreter()
    interp.eval("(define even (lambda (n) (if (= n 0) (quote yes) (odd (- n 1)))))")
    interp.eval("(define odd (lambda (n) (if (= n 0) (quote ()) (even (- n 1)))))")
    depth = sys.getrecursionlimit() * 5
    assert interp.eval(f"(even {depth})") != []
    assert interp.eval(f"(odd {depth})") == []


def test_tail_call_through_if_in_if():
    interp = Interpreter()
    interp.eval(
        "(define loop (lambda (n) (if (> n 0) (if (> n 1) (loop (- n 1)) (loop 0)) n)))"
    )
    assert interp.eval("(loop 50000)") == Decimal(0)


def test_non_tail_recursion_still_works():
    interp = Interpreter()
    interp.eval("(define fact (lambda (n) (if (= n 0) 1 (* n (fact (- n 1))))))")
    assert interp.eval("(fact 20)") == Decimal(2432902008176640000)

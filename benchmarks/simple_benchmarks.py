from timeit import timeit

from swisp.interpreter import Interpreter
from swisp.types.symbol import Symbol
from swisp.types.environment import Environment
from swisp.reader.parser import parse
from swisp.evaluation.evaluator import evaluate


def time_interpreter(setup: list[str], code: str, rounds: int) -> float:
    """Time the evaluator alone: `code` is parsed once and evaluated repeatedly."""
    itp = Interpreter()
    for form in setup:
        itp.eval(form)
    expr = parse(code)
    # Warmup
    evaluate(expr, itp.env)
    # Timed
    return timeit(lambda: evaluate(expr, itp.env), number=rounds)


# Environment lookup through a long chain of frames

def bench_lookup_chain(n_envs: int = 1000, n_lookups: int = 10000) -> float:
    root = Environment()
    key = Symbol("answer")
    root.set(key, 42)
    env = root
    for _ in range(n_envs):
        env = env.child()
    # Warmup
    for _ in range(1000):
        env.lookup(key)
    # Timed
    return timeit(lambda: env.lookup(key), number=n_lookups)


LAMBDA_APPLY_CODE = "((lambda (x y) (+ x y)) 1 2)"

FACT_SETUP = [
    "(define fact (lambda (n acc) (if (<= n 1) acc (fact (- n 1) (* n acc)))))",
]

SUM_SETUP = [
    "(define sum-n (lambda (n acc) (if (<= n 0) acc (sum-n (- n 1) (+ acc n)))))",
]


def _print_one(name: str, setup: list[str], code: str, rounds: int) -> None:
    t = time_interpreter(setup, code, rounds)
    print(f"Benchmark: {name}")
    print(f"  interpreter: {t:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    print("Benchmark: environment lookup chain (pure Python env lookup)")
    print(f"  time: {bench_lookup_chain():.6f}s")

    _print_one("lambda application", [], LAMBDA_APPLY_CODE, rounds=20000)
    _print_one("tail recursion (factorial)", FACT_SETUP, "(fact 100 1)", rounds=500)
    _print_one("arithmetic sum 1..500 (tail-rec)", SUM_SETUP, "(sum-n 500 0)", rounds=1000)
    _print_one("count down 1..100000 (tail-rec)", SUM_SETUP, "(sum-n 100000 0)", rounds=1)

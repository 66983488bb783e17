from timeit import timeit

from minilisp.interpreter import Interpreter
from minilisp.reader.cursor import Cursor
from minilisp.reader.lexer import tokenize
from minilisp.evaluation.evaluator import evaluate


FIB = "(defun fib (x) (if (<= x 1) 1 (+ (fib (- x 1)) (fib (- x 2)))))"


def time_program(code: str, rounds: int, prelude: str | None = None) -> float:
    """Time tokenize + evaluate of `code` against one warmed-up interpreter."""
    itp = Interpreter(prelude=prelude)
    # Warmup
    itp.eval(code)
    return timeit(lambda: itp.eval(code), number=rounds)


def time_evaluate_only(code: str, rounds: int, prelude: str | None = None) -> float:
    """Time evaluation alone: tokens are produced once, outside the timed loop."""
    itp = Interpreter(prelude=prelude)
    tokens = tokenize(code).tokens
    return timeit(lambda: evaluate(Cursor(tokens), itp.env), number=rounds)


def main():
    cases = [
        ("fib 15", "(fib 15)", FIB, 5),
        ("fold 200", "(+ " + " ".join(str(i) for i in range(200)) + ")", None, 2000),
        ("nested arithmetic", "(+ (* 5 (- 4 2) 3) (/ 100 (- 7 2)) (* 2 (+ 3 4)))", None, 20000),
        ("chained compare", "(< 1 2 3 4 5 6 7 8 9)", None, 20000),
    ]
    for name, code, prelude, rounds in cases:
        total = time_program(code, rounds, prelude)
        evaluate_only = time_evaluate_only(code, rounds, prelude)
        print(f"{name:<20} rounds={rounds:<6} total={total:.4f}s evaluate={evaluate_only:.4f}s")


if __name__ == "__main__":
    main()

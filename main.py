from rich.pretty import pprint

from optscan import *

__prog__ = "solve"


def main():
    scanner = Scanner.argv()
    solver, jobs, limit = Slot(str), Slot(int), Slot(float)
    verbose = statistics = False

    for token in scanner:
        if scanner.match("-G --solver", solver):
            continue
        if scanner.match("-p --parallel", jobs):
            continue
        if scanner.match("-t --time-limit", limit):
            continue
        if scanner.match("-v --verbose"):
            verbose = True
            continue
        if scanner.match("-s --statistics"):
            statistics = True
            continue
        trigger(scanner.reject(), shell=True, colorful=True, fancy=True)

    pprint(dict(solver=solver, jobs=jobs, limit=limit, verbose=verbose, statistics=statistics))


if __name__ == '__main__':
    main()

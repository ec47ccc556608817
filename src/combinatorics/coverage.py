from typing import Any, Dict, List, Mapping, Sequence


def _same(a, b) -> bool:
    # Typ muss passen: 1 == True, gilt hier aber nicht als gleicher Wert
    return type(a) is type(b) and a == b


def _contains(values: Sequence, v) -> bool:
    return any(_same(v, x) for x in values)


def _distinct(values: Sequence) -> list:
    # ohne Hashing, damit auch Listen/Dicts als Werte gehen
    out = []
    for v in values:
        if not _contains(out, v):
            out.append(v)
    return out


def uncovered_values(categories: Mapping[str, Sequence], testcases: Sequence[Mapping]) -> Dict[str, List]:
    """
    Welche Werte kommen in keinem Testfall vor?
    Rückgabe: Kategorie -> fehlende Werte (Reihenfolge wie in der Werteliste).
    Vollständig abgedeckte Kategorien tauchen nicht auf.
    """
    missing: Dict[str, List] = {}
    for key, values in categories.items():
        seen = [tc[key] for tc in testcases if key in tc]
        gaps = [v for v in _distinct(values) if not _contains(seen, v)]
        if gaps:
            missing[key] = gaps
    return missing


def is_one_wise(categories: Mapping[str, Sequence], testcases: Sequence[Mapping]) -> bool:
    return not uncovered_values(categories, testcases)


def coverage_meta(categories: Mapping[str, Sequence], testcases: Sequence[Mapping]) -> Dict[str, Any]:
    """Kennzahlen zur Abdeckung, z. B. für GenerateResponse.coverage_meta."""
    distinct = {k: _distinct(v) for k, v in categories.items() if len(v) > 0}
    total = sum(len(v) for v in distinct.values())
    missing = sum(len(v) for v in uncovered_values(distinct, testcases).values())
    return {
        "parameters": len(distinct),
        "values": total,
        "covered": total - missing,
        "complete": missing == 0,
    }

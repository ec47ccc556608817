import random
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from pydantic import ValidationError

from combinatorics import coverage, one_wise
from combinatorics.log import get_logger
from combinatorics.schemas import GenerateRequest, GenerateResponse, ParameterSpace, TestCaseOut

logger = get_logger(__name__)


def list_strategies() -> List[str]:
    return ["one-wise"]


def _validate_categories(categories: Any) -> Dict[str, List[Any]]:
    try:
        return ParameterSpace.model_validate(categories).root
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'categories'}: {err['msg']}" for err in e.errors()
        )
        logger.warning("Rejected parameter space: %s", problems)
        raise ValueError(f"Invalid parameter space: {problems}") from e


def _random_fn_for(request: GenerateRequest) -> Optional[Callable[[], float]]:
    if request.seed is None:
        return None
    # Eigener Generator, globaler random-Zustand bleibt unberührt
    return random.Random(request.seed).random


def generate_testcases(
    categories: Mapping[str, Sequence[Any]],
    request: Union[GenerateRequest, Dict[str, Any], None] = None,
    random_fn: Optional[Callable[[], float]] = None,
    validate: bool = True,
) -> GenerateResponse:
    """
    Erzeugt benannte 1-wise-Testfälle (TC_1..TC_N) inkl. Abdeckungs-Kennzahlen.

    - request: GenerateRequest oder dict (wird validiert), Standard: zufälliges Auffüllen
    - random_fn: hat Vorrang vor request.seed
    - validate: Kategorien vorher per ParameterSpace prüfen (ValueError bei Fehlern)
    """
    if request is None:
        request = GenerateRequest()
    elif not isinstance(request, GenerateRequest):
        request = GenerateRequest.model_validate(request)

    if validate:
        categories = _validate_categories(categories)

    fn = random_fn or _random_fn_for(request)
    rows = one_wise.generate(categories, random_fn=fn, padding=request.padding)

    testcases = [
        TestCaseOut(name=f"{request.name_prefix}{idx}", assignments=row)
        for idx, row in enumerate(rows, start=1)
    ]
    meta = coverage.coverage_meta(categories, rows)
    logger.info("Generated %d testcases (padding=%s, complete=%s)", len(testcases), request.padding, meta["complete"])
    return GenerateResponse(count=len(testcases), testcases=testcases, coverage_meta=meta)

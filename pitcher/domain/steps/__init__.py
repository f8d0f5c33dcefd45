from pitcher.domain.steps.base import Step
from pitcher.domain.steps.http import delete, expect_success, get, patch, post, put

__all__ = [
    "Step",
    "get",
    "post",
    "put",
    "patch",
    "delete",
    "expect_success",
]

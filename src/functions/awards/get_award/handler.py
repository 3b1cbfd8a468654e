from common.decorators import lambda_wrapper
from common.responses import message, success
from awards.interface import AwardThresholdRequest
from awards.service import (
    MISSING_PARAMS_MESSAGE,
    THRESHOLD_NOT_MET_MESSAGE,
    find_awards,
    meets_threshold,
)


@lambda_wrapper(
    model=AwardThresholdRequest,
    invalid_message=MISSING_PARAMS_MESSAGE,
    query_params=("min",),
)
def lambda_handler(request: AwardThresholdRequest, context):
    record = find_awards(request.movie_id, request.award_body)[0]

    # A filtered-out record still answers 200, callers must read the body.
    if not meets_threshold(record, request.min_awards):
        return message(200, THRESHOLD_NOT_MET_MESSAGE)

    return success(record)

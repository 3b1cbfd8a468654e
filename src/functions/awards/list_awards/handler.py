from common.decorators import lambda_wrapper
from common.responses import success
from awards.interface import AwardLookupRequest
from awards.service import MISSING_PARAMS_MESSAGE, find_awards


@lambda_wrapper(model=AwardLookupRequest, invalid_message=MISSING_PARAMS_MESSAGE)
def lambda_handler(request: AwardLookupRequest, context):
    items = find_awards(request.movie_id, request.award_body)
    return success(items)

from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from ..engine import build_engine
from ..errors import ReviewError
from ..serializers import PullRequestSerializer
from .responses import review_error_response, unexpected_error_response, validation_error


@api_view(['POST'])
def pullrequest_create(request):
    """POST /pullRequest/create - Создать PR и назначить до двух ревьюверов"""
    try:
        pr_id = request.data.get('pull_request_id')
        pr_name = request.data.get('pull_request_name')
        author_id = request.data.get('author_id')

        if not all([pr_id, pr_name, author_id]):
            return validation_error('pull_request_id, pull_request_name, and author_id are required')

        pr = build_engine().create_pull_request(pr_id, pr_name, author_id)
        serializer = PullRequestSerializer(pr)

        return Response({
            'pr': serializer.data
        }, status=status.HTTP_201_CREATED)

    except ReviewError as e:
        return review_error_response(e)
    except Exception:
        return unexpected_error_response('pullrequest_create')


@api_view(['POST'])
def pullrequest_merge(request):
    """POST /pullRequest/merge - Пометить PR как MERGED (идемпотентно)"""
    try:
        pr_id = request.data.get('pull_request_id')

        if not pr_id:
            return validation_error('pull_request_id is required')

        pr = build_engine().merge_pull_request(pr_id)
        serializer = PullRequestSerializer(pr)

        return Response({
            'pr': serializer.data
        })

    except ReviewError as e:
        return review_error_response(e)
    except Exception:
        return unexpected_error_response('pullrequest_merge')


@api_view(['POST'])
def pullrequest_reassign(request):
    """POST /pullRequest/reassign - Переназначить ревьювера"""
    try:
        pr_id = request.data.get('pull_request_id')
        old_user_id = request.data.get('old_user_id') or request.data.get('old_reviewer_id')

        if not all([pr_id, old_user_id]):
            return validation_error('pull_request_id and old_user_id are required')

        pr, new_reviewer_id = build_engine().reassign_reviewer(pr_id, old_user_id)
        serializer = PullRequestSerializer(pr)

        return Response({
            'pr': serializer.data,
            'replaced_by': new_reviewer_id
        })

    except ReviewError as e:
        return review_error_response(e)
    except Exception:
        return unexpected_error_response('pullrequest_reassign')

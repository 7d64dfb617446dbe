from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from ..errors import ReviewError
from ..serializers import TeamSerializer
from ..services import TeamService
from .responses import review_error_response, unexpected_error_response, validation_error


@api_view(['POST'])
def team_add(request):
    """POST /team/add - Создать команду с участниками"""
    try:
        team_name = request.data.get('team_name')
        members_data = request.data.get('members', [])

        if not team_name:
            return validation_error('team_name is required')

        if not isinstance(members_data, list):
            return validation_error('members must be a list')

        for i, member in enumerate(members_data):
            if not isinstance(member, dict) or not all(key in member for key in ['user_id', 'username', 'is_active']):
                return validation_error(f'Member at index {i} is missing required fields')

        team = TeamService.create_team_with_members(team_name, members_data)
        serializer = TeamSerializer(team)

        return Response({
            'team': serializer.data
        }, status=status.HTTP_201_CREATED)

    except ReviewError as e:
        return review_error_response(e)
    except Exception:
        return unexpected_error_response('team_add')


@api_view(['GET'])
def team_get(request):
    """GET /team/get - Получить команду с участниками"""
    try:
        team_name = request.query_params.get('team_name')

        if not team_name:
            return validation_error('team_name parameter is required')

        team = TeamService.get_team_with_members(team_name)
        serializer = TeamSerializer(team)

        return Response(serializer.data)

    except ReviewError as e:
        return review_error_response(e)
    except Exception:
        return unexpected_error_response('team_get')

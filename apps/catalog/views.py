from rest_framework import mixins, viewsets
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.common.exceptions import ArtistNotFound, WorkNotFound
from .models import Artist, Work
from .serializers import ArtistSerializer, WorkSerializer
from . import services


def _int_param(request, name):
    value = request.query_params.get(name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        raise ValidationError({name: 'A valid integer is required.'})


class ArtistViewSet(mixins.CreateModelMixin,
                    mixins.RetrieveModelMixin,
                    viewsets.GenericViewSet):
    """Artists of one tenant: ``GET /artists/?tenant_id=<id>``."""
    permission_classes = [IsAuthenticated]
    serializer_class = ArtistSerializer
    queryset = Artist.objects.all()
    lookup_value_regex = r'\d+'

    def get_object(self):
        try:
            return Artist.objects.get(pk=self.kwargs['pk'])
        except Artist.DoesNotExist:
            raise ArtistNotFound(artist_id=int(self.kwargs['pk']))

    def list(self, request):
        tenant_id = _int_param(request, 'tenant_id')
        if tenant_id is None:
            raise ValidationError({'tenant_id': 'This query parameter is required.'})
        artists = services.artists_for_tenant(tenant_id)
        return Response(self.get_serializer(artists, many=True).data)


class WorkViewSet(mixins.CreateModelMixin,
                  mixins.RetrieveModelMixin,
                  viewsets.GenericViewSet):
    """Works by tenant (``?tenant_id=``) or by artist (``?artist_id=``)."""
    permission_classes = [IsAuthenticated]
    serializer_class = WorkSerializer
    queryset = Work.objects.all()
    lookup_value_regex = r'\d+'

    def get_object(self):
        try:
            return Work.objects.get(pk=self.kwargs['pk'])
        except Work.DoesNotExist:
            raise WorkNotFound(work_id=int(self.kwargs['pk']))

    def list(self, request):
        artist_id = _int_param(request, 'artist_id')
        tenant_id = _int_param(request, 'tenant_id')
        if artist_id is not None:
            works = services.works_for_artist(artist_id)
        elif tenant_id is not None:
            works = services.works_for_tenant(tenant_id)
        else:
            raise ValidationError({'tenant_id': 'Either tenant_id or artist_id is required.'})
        return Response(self.get_serializer(works, many=True).data)

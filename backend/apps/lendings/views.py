"""
Views for the lendings app.

The viewset only translates HTTP to LendingEngine calls and LendingError
subclasses back to HTTP; lending rules live in the engine.
"""
from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.accounts.permissions import IsLibrarianOrReadOnly

from .engine import LendingEngine
from .exceptions import LendingError
from .filters import LendingRecordFilter
from .serializers import (
    LendingRecordSerializer,
    LendingStatsSerializer,
    LendRequestSerializer,
    MonthlyLendingSerializer,
)


def error_response(exc):
    return Response({'detail': exc.detail}, status=exc.status_code)


@extend_schema_view(
    list=extend_schema(
        summary='List lending records',
        description='Lending records filtered by status, reader, book and due-date range.',
        tags=['Lendings']
    ),
)
class LendingViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    """
    ViewSet for the lending lifecycle.
    - List/Retrieve/Overdue/Stats: any authenticated staff member
    - Lend/Return: librarians only
    """

    serializer_class = LendingRecordSerializer
    permission_classes = [IsAuthenticated, IsLibrarianOrReadOnly]
    filterset_class = LendingRecordFilter
    ordering_fields = ['borrowed_at', 'due_date', 'returned_at']
    ordering = ['-borrowed_at']

    engine_class = LendingEngine

    def get_engine(self):
        return self.engine_class()

    def get_queryset(self):
        return self.get_engine().list_lendings()

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context['clock'] = self.get_engine().clock
        return context

    @extend_schema(
        summary='Lend a book',
        description='Lend one copy of a book to a reader for loan_days days (default 14).',
        request=LendRequestSerializer,
        responses={201: LendingRecordSerializer},
        tags=['Lendings']
    )
    def create(self, request):
        """Endpoint to lend a book."""
        serializer = LendRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            record = self.get_engine().lend(
                data['book'],
                data['reader'],
                loan_days=data.get('loan_days'),
                acting_user_id=request.user.pk,
            )
        except LendingError as exc:
            return error_response(exc)

        return Response(
            self.get_serializer(record).data,
            status=status.HTTP_201_CREATED
        )

    @extend_schema(
        summary='Get lending record',
        responses={200: LendingRecordSerializer},
        tags=['Lendings']
    )
    def retrieve(self, request, pk=None):
        """Endpoint to get a single lending record."""
        try:
            record = self.get_engine().get_lending(pk)
        except LendingError as exc:
            return error_response(exc)
        return Response(self.get_serializer(record).data, status=status.HTTP_200_OK)

    @extend_schema(
        summary='Return a book',
        description='Close the lending record and put the copy back on the shelf.',
        request=None,
        responses={200: LendingRecordSerializer},
        tags=['Lendings']
    )
    @action(detail=True, methods=['post'], url_path='return')
    def return_book(self, request, pk=None):
        """Endpoint to return a lent book."""
        try:
            record = self.get_engine().return_book(pk, acting_user_id=request.user.pk)
        except LendingError as exc:
            return error_response(exc)
        return Response(self.get_serializer(record).data, status=status.HTTP_200_OK)

    @extend_schema(
        summary='Get overdue lendings',
        description=(
            'Open lendings past their due date. Reading this list also stores '
            'the OVERDUE status on records that were still BORROWED.'
        ),
        responses={200: LendingRecordSerializer(many=True)},
        tags=['Lendings']
    )
    @action(detail=False, methods=['get'])
    def overdue(self, request):
        """Endpoint to get overdue lendings."""
        try:
            records = self.get_engine().list_overdue()
        except LendingError as exc:
            return error_response(exc)
        serializer = self.get_serializer(records, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)

    @extend_schema(
        summary='Lending counters',
        responses={200: LendingStatsSerializer},
        tags=['Lendings']
    )
    @action(detail=False, methods=['get'])
    def stats(self, request):
        """Endpoint to get dashboard counters."""
        serializer = LendingStatsSerializer(self.get_engine().stats())
        return Response(serializer.data, status=status.HTTP_200_OK)

    @extend_schema(
        summary='Lendings per month',
        responses={200: MonthlyLendingSerializer(many=True)},
        tags=['Lendings']
    )
    @action(detail=False, methods=['get'])
    def monthly(self, request):
        """Endpoint to get the number of lendings per month."""
        year = request.query_params.get('year')
        if year is not None and not year.isdigit():
            return Response(
                {'detail': 'year must be a number.'},
                status=status.HTTP_400_BAD_REQUEST
            )
        rows = self.get_engine().monthly_lendings(year=int(year) if year else None)
        serializer = MonthlyLendingSerializer(rows, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)

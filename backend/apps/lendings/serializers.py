"""
Serializers for the lendings app.
"""
from rest_framework import serializers

from apps.books.models import Book
from apps.readers.models import Reader

from .clock import SystemClock
from .models import LendingRecord


class BookSummarySerializer(serializers.ModelSerializer):
    """Book fields shown next to a lending record."""

    class Meta:
        model = Book
        fields = ['id', 'isbn', 'title', 'author', 'total_copies', 'available_copies']


class ReaderSummarySerializer(serializers.ModelSerializer):
    """Reader fields shown next to a lending record."""

    class Meta:
        model = Reader
        fields = ['id', 'name', 'email', 'phone']


class LendingRecordSerializer(serializers.ModelSerializer):
    """Read representation of a lending record."""

    book_details = BookSummarySerializer(source='book', read_only=True)
    reader_details = ReaderSummarySerializer(source='reader', read_only=True)
    lent_by_email = serializers.EmailField(source='lent_by.email', read_only=True)
    current_status = serializers.SerializerMethodField()

    class Meta:
        model = LendingRecord
        fields = [
            'id', 'book', 'book_details', 'reader', 'reader_details',
            'lent_by', 'lent_by_email', 'borrowed_at', 'due_date',
            'returned_at', 'status', 'current_status',
            'created_at', 'updated_at'
        ]
        read_only_fields = fields

    def get_current_status(self, obj):
        """Status derived from the dates at read time, independent of the last sweep."""
        clock = self.context.get('clock') or SystemClock()
        return obj.status_at(clock.now())


class LendRequestSerializer(serializers.Serializer):
    """Input for lending a book; existence checks happen in the engine."""

    book = serializers.IntegerField()
    reader = serializers.IntegerField()
    loan_days = serializers.IntegerField(required=False)


class MonthlyLendingSerializer(serializers.Serializer):
    month = serializers.IntegerField()
    count = serializers.IntegerField()


class LendingStatsSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    active = serializers.IntegerField()
    overdue = serializers.IntegerField()
    returned = serializers.IntegerField()

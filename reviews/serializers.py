from rest_framework import serializers

from users.serializers import UserSummarySerializer
from .models import Review

MISSING_FIELDS = {
    'required': 'All fields are required',
    'null': 'All fields are required',
    'blank': 'All fields are required',
}


class ReviewSerializer(serializers.ModelSerializer):
    user = UserSummarySerializer(read_only=True)
    likes = serializers.PrimaryKeyRelatedField(many=True, read_only=True)

    class Meta:
        model = Review
        fields = (
            'id', 'user', 'product', 'comment', 'rating', 'likes', 'is_edited',
            'edited_at', 'status', 'created_at', 'updated_at'
        )
        read_only_fields = fields


class ReviewSubmitSerializer(serializers.Serializer):
    productId = serializers.IntegerField(min_value=1, error_messages=MISSING_FIELDS)
    rating = serializers.FloatField(error_messages=MISSING_FIELDS)
    comment = serializers.CharField(error_messages=MISSING_FIELDS)

    def validate_rating(self, value):
        if not (1 <= value <= 5):
            raise serializers.ValidationError("Rating must be between 1 and 5.")
        return value

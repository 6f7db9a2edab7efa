"""
API serializers for the trainer application.

Wire names are camelCase (``correctZoneId``, ``objectIds``) to match the
browser client; model fields stay snake_case.
"""

from django.contrib.auth import authenticate, get_user_model
from rest_framework import serializers

from api.messages import ErrorMessages
from game_objects.models import GameObject
from scenarios.models import Scenario
from training.placement import Placement
from zones.models import Zone

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    """Serializer for the signed-in user."""

    isAdmin = serializers.BooleanField(source="is_staff", read_only=True)

    class Meta:
        model = User
        fields = ("id", "username", "email", "isAdmin")
        read_only_fields = ("id", "username", "email")


class LoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    username = serializers.CharField()
    password = serializers.CharField(write_only=True)

    def validate(self, attrs):
        """Authenticate the credentials and attach the user."""
        username = attrs.get("username")
        password = attrs.get("password")

        if not (username and password):
            raise serializers.ValidationError(ErrorMessages.CREDENTIALS_REQUIRED)

        user = authenticate(
            request=self.context.get("request"),
            username=username,
            password=password,
        )
        if user is None:
            # authenticate() also returns None for inactive users with the
            # default backend; report those explicitly.
            inactive = User.objects.filter(username=username, is_active=False).first()
            if inactive is not None and inactive.check_password(password):
                raise serializers.ValidationError(ErrorMessages.ACCOUNT_DISABLED)
            raise serializers.ValidationError(ErrorMessages.INVALID_CREDENTIALS)

        attrs["user"] = user
        return attrs


class ZoneSerializer(serializers.ModelSerializer):
    """Zone rectangle as served to the canvas and the admin console."""

    description = serializers.CharField(
        allow_blank=True, allow_null=True, default=""
    )

    class Meta:
        model = Zone
        fields = ("id", "name", "x", "y", "width", "height", "description")
        read_only_fields = ("id",)

    def validate_description(self, value):
        return value or ""


class GameObjectSerializer(serializers.ModelSerializer):
    """Game object including its answer-key fields."""

    objectType = serializers.ChoiceField(
        source="object_type", choices=GameObject.OBJECT_TYPE_CHOICES
    )
    correctZoneId = serializers.PrimaryKeyRelatedField(
        source="correct_zone", queryset=Zone.objects.all()
    )
    errorMessage = serializers.CharField(source="error_message")
    successMessage = serializers.CharField(source="success_message")
    points = serializers.IntegerField(min_value=0)

    class Meta:
        model = GameObject
        fields = (
            "id",
            "name",
            "objectType",
            "correctZoneId",
            "errorMessage",
            "successMessage",
            "points",
        )
        read_only_fields = ("id",)


class ScenarioSerializer(serializers.ModelSerializer):
    """Scenario with the ids of the zones and objects in play."""

    customerName = serializers.CharField(source="customer_name", max_length=100)
    description = serializers.CharField(
        allow_blank=True, allow_null=True, default=""
    )
    zoneIds = serializers.PrimaryKeyRelatedField(
        source="zones",
        many=True,
        allow_empty=False,
        queryset=Zone.objects.all(),
    )
    objectIds = serializers.PrimaryKeyRelatedField(
        source="game_objects",
        many=True,
        allow_empty=False,
        queryset=GameObject.objects.all(),
    )

    class Meta:
        model = Scenario
        fields = ("id", "name", "customerName", "description", "zoneIds", "objectIds")
        read_only_fields = ("id",)

    def validate_description(self, value):
        return value or ""


class ScenarioContentSerializer(serializers.Serializer):
    """Body of ``GET /api/scenario/{id}``: the scenario and what is in play."""

    def to_representation(self, instance):
        return {
            "scenario": ScenarioSerializer(instance).data,
            "zones": ZoneSerializer(instance.zones.all(), many=True).data,
            "objects": GameObjectSerializer(
                instance.game_objects.all(), many=True
            ).data,
        }


# Range of the BigAutoField primary keys the ids are looked up against.
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


class PlacementSerializer(serializers.Serializer):
    """One ``{objectId, zoneId}`` pair."""

    objectId = serializers.IntegerField(min_value=MIN_ID, max_value=MAX_ID)
    zoneId = serializers.IntegerField(min_value=MIN_ID, max_value=MAX_ID)


class ValidationRequestSerializer(serializers.Serializer):
    """Body of ``POST /api/validate``."""

    placements = PlacementSerializer(many=True, allow_empty=True)

    def validate_placements(self, value):
        """
        Reject an object placed in two zones.

        Stricter than plain scoring, which would count the object twice.
        Shared zone ids are left alone: unknown objects are skipped when
        scored, so only the answer key decides what counts.
        """
        object_ids = [item["objectId"] for item in value]

        if len(set(object_ids)) != len(object_ids):
            raise serializers.ValidationError(ErrorMessages.DUPLICATE_OBJECT_PLACEMENT)
        return value

    def get_placements(self):
        """Validated placements as ``Placement`` tuples, in submission order."""
        return [
            Placement(object_id=item["objectId"], zone_id=item["zoneId"])
            for item in self.validated_data["placements"]
        ]

from rest_framework import serializers
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer
from user.models import User


class UserRegistrationSerializer(serializers.ModelSerializer):
    password = serializers.CharField(
        write_only=True,
        min_length=8,
        style={"input_type": "password"},
        help_text="최소 8자 이상의 비밀번호를 입력하세요.",
    )

    class Meta:
        model = User
        fields = ["username", "email", "password"]

    def validate_password(self, value):
        """
        비밀번호 복잡도 검증
        """
        if value.isdigit():
            raise serializers.ValidationError("密码不能全部为数字")
        if value.isalpha():
            raise serializers.ValidationError("密码不能全部为字母")
        return value

    def create(self, validated_data):
        return User.objects.create_user(
            username=validated_data["username"],
            email=validated_data.get("email", ""),
            password=validated_data["password"],
        )


class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["id", "username", "email", "role", "date_joined"]
        read_only_fields = fields


class PortalTokenObtainPairSerializer(TokenObtainPairSerializer):
    """access/refresh 토큰에 username, role 클레임을 추가합니다."""

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token["username"] = user.username
        token["role"] = user.role
        return token

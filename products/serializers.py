from rest_framework import serializers

from .models import Product


class ProductSerializer(serializers.ModelSerializer):
    """
    Serializer for Product request and response bodies.
    The id is accepted on input so updates can be checked against the URL;
    create ignores it.
    """
    id = serializers.IntegerField(
        required=False,
        allow_null=True,
        help_text="Product id (ignored on create, must match the URL on update)"
    )

    class Meta:
        model = Product
        fields = ['id', 'name', 'price']

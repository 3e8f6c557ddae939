from rest_framework import serializers


class RenderedLeafSerializer(serializers.Serializer):
    href = serializers.CharField()
    label = serializers.CharField()
    icon = serializers.CharField(allow_blank=True)
    is_active = serializers.BooleanField()


class RenderedNodeSerializer(serializers.Serializer):
    """Serializa links e seções da árvore de navegação já resolvida."""

    def to_representation(self, instance):
        if instance.kind == "link":
            data = RenderedLeafSerializer(instance).data
            return {"type": "link", **data}
        return {
            "type": "section",
            "id": instance.id,
            "title": instance.title,
            "collapsible": instance.collapsible,
            "is_active": instance.is_active,
            "is_open": instance.is_open,
            "is_heading": instance.is_heading,
            "items": RenderedLeafSerializer(instance.items, many=True).data,
        }


class SectionToggleSerializer(serializers.Serializer):
    section_id = serializers.CharField(max_length=100)
    location = serializers.CharField(required=False, allow_blank=True)

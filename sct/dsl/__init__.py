# DSL モジュール
# テストケーススキーマ定義、検証、YAML シリアライザを提供

from . import schema  # noqa: F401
from . import serializer  # noqa: F401
from . import validator  # noqa: F401

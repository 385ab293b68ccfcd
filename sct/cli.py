"""
CLI エントリポイント — Typer ベースのコマンドラインインターフェース

sct コマンドとして以下のサブコマンドを提供する:
  - parse: 記録 HTML → テストケース（YAML / JSON）
  - validate: テストケースの構造検証
  - generate: 記録 HTML / YAML → Playwright スクリプト
  - list-actions: アクション種別の一覧
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Typer アプリ定義
# ---------------------------------------------------------------------------

app = typer.Typer(
    help=(
        "sct — Scribe 記録 → Playwright テスト変換ツール\n\n"
        "基本の流れ:\n"
        "  1. sct parse recording.html -o flows/login.yaml   記録をテストケースに変換\n"
        "  2. sct generate flows/login.yaml                  スクリプトを生成\n\n"
        "詳しくは各コマンドに --help を付けてください。"
    ),
    no_args_is_help=True,
)

_YAML_SUFFIXES = (".yaml", ".yml")

_ACTION_DESCRIPTIONS: dict[str, str] = {
    "goto": "URL へ遷移する（Navigate to ...）",
    "click": "要素をクリックする（Click ... / Confirm ...）",
    "fill": "直前にクリックしたフィールドへ入力する（Type \"...\"）",
    "upload": "ファイルをアップロードする（Upload ...）",
    "wait": "指定ミリ秒待機する",
    "assert": "要素の表示・テキストを検証する",
    "view": "画面に表示されていることを確認する（View ...）",
    "unknown": "分類できなかったステップ（コメントとして出力）",
}


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="詳細ログを出力する"),
) -> None:
    """ログ設定を初期化する。"""
    from .config import load_config_from_env

    config = load_config_from_env()
    level_name = config.log_level or ("INFO" if verbose else "WARNING")
    logging.basicConfig(
        level=getattr(logging, level_name),
        format="%(name)s - %(message)s",
    )


# ---------------------------------------------------------------------------
# parse コマンド
# ---------------------------------------------------------------------------

@app.command()
def parse(
    markup_file: Path = typer.Argument(..., help="Scribe の記録 HTML ファイル"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="出力先 YAML ファイル（省略時は JSON を標準出力へ）",
    ),
) -> None:
    """記録 HTML をテストケースに変換する。"""
    from .dsl.serializer import TestCaseSerializer
    from .importer import DocumentParser

    try:
        markup = markup_file.read_text(encoding="utf-8")
        test_case = DocumentParser().parse(markup)

        if output is None:
            typer.echo(test_case.model_dump_json(indent=2, exclude_none=True))
            return

        TestCaseSerializer().dump(test_case, output)
        typer.echo(f"変換完了: {output} ({len(test_case.steps)} ステップ)")
    except Exception as exc:
        typer.echo(f"エラー: {exc}", err=True)
        raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# validate コマンド
# ---------------------------------------------------------------------------

@app.command()
def validate(
    input_file: Path = typer.Argument(..., help="記録 HTML またはテストケース YAML"),
) -> None:
    """テストケースの構造検証を行う。"""
    from .dsl.validator import TestCaseValidator

    try:
        test_case = _load_test_case(input_file)
    except Exception as exc:
        typer.echo(f"エラー: {exc}", err=True)
        raise typer.Exit(code=1)

    result = TestCaseValidator().validate(test_case)
    if result.isValid:
        typer.echo(f"✓ {input_file}: 検証 OK ({len(test_case.steps)} ステップ)")
        return

    for error in result.errors:
        typer.echo(f"✗ {error}", err=True)
    raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# generate コマンド
# ---------------------------------------------------------------------------

@app.command()
def generate(
    input_file: Path = typer.Argument(..., help="記録 HTML またはテストケース YAML"),
    output_dir: Optional[Path] = typer.Option(
        None, "--output-dir", "-o", help="出力先ディレクトリ（デフォルト: generated-tests）",
    ),
    language: Optional[str] = typer.Option(
        None, "--language", "-l", help="生成言語 (python / javascript)",
    ),
    base_url: Optional[str] = typer.Option(
        None, "--base-url", help="ステップ前に遷移するベース URL",
    ),
    screenshots: Optional[bool] = typer.Option(
        None, "--screenshots/--no-screenshots", help="各ステップ後にスクリーンショットを取得する",
    ),
    skip_validation: bool = typer.Option(
        False, "--skip-validation", help="構造検証を行わずに生成する",
    ),
) -> None:
    """記録 HTML またはテストケース YAML から Playwright スクリプトを生成する。"""
    from .config import apply_overrides, load_config_from_env
    from .dsl.validator import TestCaseValidator
    from .generator import GeneratorOptions, ScriptWriter

    try:
        config = apply_overrides(
            load_config_from_env(),
            output_dir=str(output_dir) if output_dir is not None else None,
            language=language,
            base_url=base_url,
            screenshots=screenshots,
        )
        test_case = _load_test_case(input_file)

        if not skip_validation:
            result = TestCaseValidator().validate(test_case)
            if not result.isValid:
                for error in result.errors:
                    typer.echo(f"✗ {error}", err=True)
                typer.echo("検証エラーのため生成を中止しました（--skip-validation で無視できます）", err=True)
                raise typer.Exit(code=1)

        options = GeneratorOptions(
            language=config.language,
            base_url=config.base_url,
            include_screenshots=config.screenshots,
        )
        path = ScriptWriter(Path(config.output_dir)).write(test_case, options)
        typer.echo(f"生成完了: {path}")
    except typer.Exit:
        raise
    except Exception as exc:
        typer.echo(f"エラー: {exc}", err=True)
        raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# list-actions コマンド
# ---------------------------------------------------------------------------

@app.command("list-actions")
def list_actions() -> None:
    """アクション種別の一覧を表示する。"""
    from .dsl.schema import ACTION_TYPES

    for action in ACTION_TYPES:
        typer.echo(f"  {action:10s} {_ACTION_DESCRIPTIONS.get(action, '')}")

    typer.echo(f"\n合計: {len(ACTION_TYPES)} 種別")


# ---------------------------------------------------------------------------
# ヘルパー関数
# ---------------------------------------------------------------------------

def _load_test_case(input_file: Path):
    """拡張子に応じて YAML を読み込むか、記録 HTML をパースする。

    Args:
        input_file: 記録 HTML またはテストケース YAML

    Returns:
        TestCase

    Raises:
        FileNotFoundError: ファイルが存在しない場合
        ValueError: YAML の構文・スキーマエラーの場合
    """
    from .dsl.serializer import TestCaseSerializer
    from .importer import DocumentParser

    if input_file.suffix.lower() in _YAML_SUFFIXES:
        return TestCaseSerializer().load(input_file)

    if not input_file.exists():
        raise FileNotFoundError(f"記録ファイルが見つかりません: {input_file}")
    return DocumentParser().parse(input_file.read_text(encoding="utf-8"))

import tomllib
from importlib import metadata as importlib_metadata
from pathlib import Path
from typing import cast

from typing_extensions import NotRequired, ReadOnly, Required, TypedDict

DISTRIBUTION_NAME = "pytoolkit-optional"
UNKNOWN_VERSION = "unknown"
PYPROJECT_PATH = Path(__file__).parent.parent / "pyproject.toml"


class ProjectTable(TypedDict):
    """[project]セクションのうち、バージョン解決に使う項目の型定義"""

    name: ReadOnly[Required[str]]
    version: ReadOnly[NotRequired[str]]


class PyProjectToml(TypedDict, total=False):
    project: ReadOnly[Required[ProjectTable]]


def load_pyproject(path: Path = PYPROJECT_PATH) -> PyProjectToml | None:
    """
    ソースツリーのpyproject.tomlを読み込む。

    インストール済みのパッケージにはpyproject.tomlが含まれないため、
    ファイルが存在しない場合はNoneを返す。
    """
    if not path.is_file():
        return None
    with path.open("rb") as f:
        return cast(PyProjectToml, tomllib.load(f))


def get_version(
    pyproject: PyProjectToml | None,
    distribution: str = DISTRIBUTION_NAME,
) -> str:
    """
    パッケージのバージョンを返す。

    同じプロジェクトのpyproject.tomlがあればその値を優先し、
    なければインストール済みディストリビューションのメタデータから取得する。
    どちらからも取得できない場合はUNKNOWN_VERSIONを返す。
    """
    if pyproject is not None:
        project = pyproject.get("project")
        if project is not None and project.get("name") == distribution:
            return project.get("version", UNKNOWN_VERSION)

    try:
        return importlib_metadata.version(distribution)
    except importlib_metadata.PackageNotFoundError:
        return UNKNOWN_VERSION


VERSION = get_version(load_pyproject())

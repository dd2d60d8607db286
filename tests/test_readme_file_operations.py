import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from readme_editor.core.readme_file_operations import (
    add_tag_definition,
    list_readme_code_blocks,
    read_latest_tag,
    set_latest_tag,
)
from readme_editor.core.repository_operations import (
    construct_readme_path,
    resolve_readme_path,
)
from readme_editor.data_models import RepositoryMetadata
from readme_editor.errors import HeadingNotIndexedError, MarkerNotFoundError

from conftest import NETWORK_README

README_FOLDER = "specification/network/resource-manager"


class ReadmeFileOperationTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmpdir = TemporaryDirectory()
        self.repo_path = Path(self.tmpdir.name).resolve()
        self.repository = RepositoryMetadata(
            name="specs",
            path=self.repo_path,
            description="test repository",
            exists=True,
        )

    def tearDown(self) -> None:
        self.tmpdir.cleanup()

    def _write_readme(self, content: str, folder: str = README_FOLDER) -> Path:
        readme_path = self.repo_path / folder / "readme.md"
        readme_path.parent.mkdir(parents=True, exist_ok=True)
        readme_path.write_bytes(content.encode("utf-8"))
        return readme_path

    def test_construct_readme_path_appends_readme_for_folders(self) -> None:
        self.assertEqual(construct_readme_path(README_FOLDER), Path(README_FOLDER) / "readme.md")
        self.assertEqual(
            construct_readme_path(f"{README_FOLDER}/readme.python.md"),
            Path(README_FOLDER) / "readme.python.md",
        )

    def test_resolve_readme_path_rejects_escape(self) -> None:
        with self.assertRaises(ValueError):
            resolve_readme_path(self.repository, "../elsewhere")

    def test_list_code_blocks_reports_yaml(self) -> None:
        self._write_readme(NETWORK_README)
        result = list_readme_code_blocks(self.repository, README_FOLDER)

        self.assertEqual(result["readme"], f"{README_FOLDER}/readme.md")
        headings = [entry["heading"] for entry in result["code_blocks"]]
        self.assertEqual(
            headings,
            ["Basic Information", "Tag: package-2023-01", "Tag: package-2022-05"],
        )
        basic = result["code_blocks"][0]
        self.assertEqual(basic["yaml"]["tag"], "package-2023-01")
        self.assertEqual(basic["info"], "yaml")
        self.assertEqual(result["code_blocks"][1]["info"], "yaml $(tag) == 'package-2023-01'")

    def test_list_code_blocks_tolerates_non_yaml_blocks(self) -> None:
        self._write_readme("## Example\n\n```bash\nautorest readme.md\n```\n")
        result = list_readme_code_blocks(self.repository, README_FOLDER)
        self.assertIsNone(result["code_blocks"][0]["yaml"])

    def test_read_latest_tag(self) -> None:
        self._write_readme(NETWORK_README)
        result = read_latest_tag(self.repository, README_FOLDER)
        self.assertEqual(result["tag"], "package-2023-01")

    def test_set_latest_tag_updates_file(self) -> None:
        readme_path = self._write_readme(NETWORK_README)
        result = set_latest_tag(self.repository, README_FOLDER, "package-2022-05")

        self.assertEqual(result["status"], "updated")
        self.assertEqual(result["previous_tag"], "package-2023-01")
        self.assertEqual(
            readme_path.read_bytes().decode("utf-8"),
            NETWORK_README.replace("tag: package-2023-01\n", "tag: package-2022-05\n", 1),
        )

    def test_set_latest_tag_is_noop_when_unchanged(self) -> None:
        readme_path = self._write_readme(NETWORK_README)
        result = set_latest_tag(self.repository, README_FOLDER, "package-2023-01")

        self.assertEqual(result["status"], "unchanged")
        self.assertEqual(readme_path.read_bytes().decode("utf-8"), NETWORK_README)

    def test_set_latest_tag_preserves_crlf(self) -> None:
        crlf = NETWORK_README.replace("\n", "\r\n")
        readme_path = self._write_readme(crlf)
        set_latest_tag(self.repository, README_FOLDER, "package-2024-01")

        self.assertEqual(
            readme_path.read_bytes().decode("utf-8"),
            crlf.replace("tag: package-2023-01\r\n", "tag: package-2024-01\r\n", 1),
        )

    def test_set_latest_tag_without_basic_information(self) -> None:
        readme_path = self._write_readme("# Empty\n")
        with self.assertRaises(HeadingNotIndexedError):
            set_latest_tag(self.repository, README_FOLDER, "package-2024-01")
        self.assertEqual(readme_path.read_text(encoding="utf-8"), "# Empty\n")

    def test_missing_readme_raises(self) -> None:
        with self.assertRaises(FileNotFoundError):
            read_latest_tag(self.repository, "specification/missing")

    def test_add_tag_definition_inserts_and_sets_latest(self) -> None:
        readme_path = self._write_readme(NETWORK_README)
        files = ["Microsoft.Network/stable/2024-01-01/network.json"]
        result = add_tag_definition(
            self.repository, README_FOLDER, "package-2024-01", files, set_latest=True
        )

        self.assertEqual(result["status"], "tag_added")
        text = readme_path.read_text(encoding="utf-8")
        self.assertLess(
            text.index("### Tag: package-2024-01"),
            text.index("### Tag: package-2023-01"),
        )
        self.assertEqual(read_latest_tag(self.repository, README_FOLDER)["tag"], "package-2024-01")

    def test_add_tag_definition_keeps_latest_by_default(self) -> None:
        self._write_readme(NETWORK_README)
        add_tag_definition(self.repository, README_FOLDER, "package-2024-01", ["a.json"])
        self.assertEqual(read_latest_tag(self.repository, README_FOLDER)["tag"], "package-2023-01")

    def test_add_tag_definition_rejects_existing_tag(self) -> None:
        readme_path = self._write_readme(NETWORK_README)
        with self.assertRaises(ValueError):
            add_tag_definition(self.repository, README_FOLDER, "package-2022-05", ["a.json"])
        self.assertEqual(readme_path.read_text(encoding="utf-8"), NETWORK_README)

    def test_add_tag_definition_without_marker(self) -> None:
        readme_path = self._write_readme("# No tags yet\n")
        with self.assertRaises(MarkerNotFoundError):
            add_tag_definition(self.repository, README_FOLDER, "package-2024-01", ["a.json"])
        self.assertEqual(readme_path.read_text(encoding="utf-8"), "# No tags yet\n")


if __name__ == "__main__":
    unittest.main()

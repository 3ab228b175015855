"""
Pytest configuration and fixtures for orchestrator tests.
"""

from typing import Any, Dict

import pytest

from orchestrator.core.types import FileNode

SAMPLE_WORKSPACE: Dict[str, Any] = {
    "name": "C:/Users/Developer",
    "type": "folder",
    "children": [
        {
            "name": "_UNSORTED_DESKTOP",
            "type": "folder",
            "children": [
                {"name": "random_note.txt", "type": "file", "size": 2},
                {"name": "downloaded_setup.exe", "type": "file", "size": 54000},
                {"name": "Final_Presentation_Export.pdf", "type": "file", "size": 4500},
            ],
            "size": 58502,
        },
        {"name": ".gitconfig", "type": "file", "age": 5, "size": 2},
        {"name": ".zshrc", "type": "file", "age": 5, "size": 4},
        {
            "name": "NextJS-Dashboard",
            "type": "folder",
            "age": 2,
            "children": [
                {"name": "package.json", "type": "file", "size": 4},
                {"name": "src", "type": "folder", "children": [], "size": 120},
            ],
        },
        {"name": "Clean_Architecture_Book.pdf", "type": "file", "age": 4, "size": 15000},
        {"name": "React_Patterns_Cheatsheet.md", "type": "file", "age": 20, "size": 12},
        {
            "name": "PyTorch_Model_Training",
            "type": "folder",
            "age": 15,
            "children": [
                {"name": "venv", "type": "folder", "children": [], "size": 450000},
                {"name": "requirements.txt", "type": "file", "size": 1},
            ],
        },
        {
            "name": "Old_Unity_Prototype_v1",
            "type": "folder",
            "age": 400,
            "children": [
                {"name": "Assets", "type": "folder", "children": [], "size": 2500000}
            ],
        },
        {"name": "Invoice_Design_Services.pdf", "type": "file", "age": 10, "size": 450},
        {"name": "NDA_Client_X.docx", "type": "file", "age": 12, "size": 24},
        {"name": "Blood_Work_Results.pdf", "type": "file", "age": 3, "size": 1200},
        {"name": "Passport_Scan_2024.jpg", "type": "file", "age": 45, "size": 3500},
        {
            "name": ".dotnet",
            "type": "folder",
            "age": 300,
            "children": [
                {"name": "sdk", "type": "folder", "children": [], "size": 800000}
            ],
        },
        {"name": "Empty_Project", "type": "folder", "children": [], "age": 100, "size": 0},
        {"name": "App_Screenshot_v1.png", "type": "file", "age": 1, "size": 2500},
    ],
}


@pytest.fixture
def sample_workspace() -> FileNode:
    """A developer home directory in need of organizing."""
    return FileNode.model_validate(SAMPLE_WORKSPACE)


@pytest.fixture
def workspace_dir(tmp_path):
    """Create a small real directory tree to organize."""
    root = tmp_path / "workspace"
    root.mkdir()

    unsorted = root / "_UNSORTED_DESKTOP"
    unsorted.mkdir()
    (unsorted / "random_note.txt").write_text("remember the milk")
    (unsorted / "mystery.bin").write_bytes(b"\x00" * 10)

    (root / "Empty_Project").mkdir()

    project = root / "dashboard"
    project.mkdir()
    (project / "package.json").write_text("{}")
    (project / "index.js").write_text("console.log('hi')")

    (root / "Invoice_March.pdf").write_bytes(b"%PDF" + b"\x00" * 4096)

    return root

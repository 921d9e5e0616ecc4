import json

import pytest

STATS = {
    "errors": [],
    "warnings": ["asset size limit: main.js exceeds 244 KiB"],
    "assets": [
        {"name": "vendor.js", "size": 3072, "chunks": [1]},
        {"name": "main.js", "size": 5120, "chunks": [0]},
        {"name": "main.js.map", "size": 10, "chunks": [0]},
    ],
    "chunks": [
        {"id": 0, "files": ["main.js"], "modules": [
            {"id": 1, "identifier": "/app/src/index.js", "name": "./src/index.js", "size": 3000, "chunks": [0]},
            {"id": 2, "identifier": "/app/src/b.js", "name": "./src/b.js", "size": 2000, "chunks": [0],
             "issuerId": 1, "issuer": "/app/src/index.js"},
        ]},
        {"id": 1, "files": ["vendor.js"], "modules": [
            {"id": 3, "identifier": "/app/node_modules/lib/index.js", "name": "./node_modules/lib/index.js",
             "size": 3072, "chunks": [1], "issuerId": 2},
        ]},
    ],
    "modules": [
        {"id": 1, "identifier": "/app/src/index.js", "name": "./src/index.js", "size": 3000, "chunks": [0]},
        {"id": 2, "identifier": "/app/src/b.js", "name": "./src/b.js", "size": 2000, "chunks": [0],
         "issuerId": 1, "issuer": "/app/src/index.js"},
        {"id": 3, "identifier": "/app/node_modules/lib/index.js", "name": "./node_modules/lib/index.js",
         "size": 3072, "chunks": [1], "issuerId": 2},
    ],
}


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Keep config discovery away from the developer's working directory."""
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def stats_file(tmp_path):
    f = tmp_path / "stats.json"
    f.write_text(json.dumps(STATS))
    return str(f)

import pytest


VENDOR = {
    "jquery-2.2.4.min.js": b"/*! jQuery v2.2.4 */\nwindow.jQuery={};",
    "jquery.ba-hashchange.min.js": b"/* hashchange */\n(function($){})(jQuery);",
    "jquery.swiftype.autocomplete.js": b"// autocomplete\nvar ac = 1;\n",
    "jquery.swiftype.search.js": b"// search\nvar search = 2;\n",
}

FONTS = {
    "fontawesome-webfont.woff": bytes(range(256)),
    "fontawesome-webfont.ttf": b"\x00\x01\x00\x00ttf",
    "proximanova.otf": b"OTTO\x00\x0b",
}


def _write(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(data, str):
        data = data.encode("utf-8")
    path.write_bytes(data)


def make_theme(project_root):
    """A minimal okta theme static tree under project_root."""
    root = project_root / "themes" / "okta" / "static"
    for name, data in VENDOR.items():
        _write(root / "js" / "vendor" / name, data)
    _write(root / "js" / "myOkta.js", "// myOkta\nvar orgs = [];\n")
    _write(root / "css" / "_vars.scss", "$brand: #007dc1;\n")
    _write(root / "css" / "base.scss", '@import "vars";\nbody { color: $brand; }\n')
    _write(root / "css" / "layout.scss", ".page { .header { margin: 0; } }\n")
    _write(root / "css" / "animate.css", "@keyframes bounce { from { top: 0; } }\n")
    _write(
        root / "css" / "font-awesome" / "font-awesome.scss",
        ".fa { display: inline-block; }\n",
    )
    for name, data in FONTS.items():
        _write(root / "fonts" / name, data)
    return root


@pytest.fixture
def static(tmp_path):
    return make_theme(tmp_path)


@pytest.fixture
def params(tmp_path, static):
    return {"project": {"root": str(tmp_path), "theme": "okta"}}


@pytest.fixture
def bracketed_params(tmp_path):
    """Params whose project root contains glob metacharacters."""
    root = tmp_path / "site[1]"
    make_theme(root)
    return {"project": {"root": str(root), "theme": "okta"}}

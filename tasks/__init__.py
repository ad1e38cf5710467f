import ast
import pathlib
import shutil

import invoke
import parver


ROOT = pathlib.Path(__file__).resolve().parent.parent

INIT_PY = ROOT.joinpath("src", "sudokulib", "__init__.py")

REL_TYPES = ("major", "minor", "patch")


def _read_version():
    with INIT_PY.open() as f:
        for line in f:
            if line.startswith("__version__ = "):
                value = ast.literal_eval(line.split("=", 1)[-1].strip())
                return parver.Version.parse(value).normalize()
    raise ValueError("__version__ not found in __init__.py")


def _write_version(v):
    lines = []
    with INIT_PY.open() as f:
        for line in f:
            if line.startswith("__version__ = "):
                line = f"__version__ = {repr(str(v))}\n"
            lines.append(line)
    with INIT_PY.open("w", newline="\n") as f:
        f.write("".join(lines))


def _rel_index(type_):
    if type_ not in REL_TYPES:
        raise ValueError(f"{type_} not in {REL_TYPES}")
    return REL_TYPES.index(type_)


@invoke.task()
def clean(ctx):
    """Remove previously built distributables."""
    dist = ROOT.joinpath("dist")
    if dist.exists():
        print(f"[clean] removing {dist}")
        shutil.rmtree(str(dist))


@invoke.task(pre=[clean])
def build(ctx):
    """Build the source and wheel distributables."""
    ctx.run("setl publish --no-upload")


@invoke.task()
def release(ctx, type_="", repo="", prebump="patch"):
    """Make a new release.

    :param type_: Part of the version to bump before releasing. Empty value
        releases the version currently in ``__init__.py``, minus its dev
        suffix.
    :param repo: Name of the index server to upload to. Empty value builds
        distributables locally.
    :param prebump: Part of the version to bump after releasing. Empty value
        disables the prebump.
    """
    version = _read_version().base_version()
    if type_:
        version = version.bump_release(index=_rel_index(type_))
    print(f"[release] {version}")
    _write_version(version)

    ctx.run(f"towncrier --version {version}")
    ctx.run(f'git commit -am "Release {version}"')
    ctx.run(f'git tag -a {version} -m "Version {version}"')

    if repo:
        ctx.run(f"setl publish --repository={repo}")
    else:
        ctx.run("setl publish --no-upload")

    if prebump:
        version = version.bump_release(index=_rel_index(prebump)).bump_dev()
        print(f"[release] prebump to {version}")
        _write_version(version)
        ctx.run(f'git commit -am "Prebump to {version}"')

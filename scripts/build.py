#!/usr/bin/env python3
"""
Build script packaging the products API for Lambda.

Produces build/products_api.zip containing the ``products_api`` package and
its runtime dependencies. Every handler module in the package is deployed from
this single archive, e.g. ``products_api.handlers.create_product.lambda_handler``.
"""
import os
import shutil
import subprocess
import sys
import zipfile
from pathlib import Path

PACKAGE_NAME = "products_api"


def main():
    """Main build function"""
    project_root = Path(__file__).parent.parent
    package_dir = project_root / "src" / PACKAGE_NAME
    build_dir = project_root / "build"
    zip_path = build_dir / f"{PACKAGE_NAME}.zip"

    build_dir.mkdir(exist_ok=True)

    handlers = sorted(
        path.stem for path in (package_dir / "handlers").glob("*.py")
        if path.stem != "__init__"
    )
    print(f"Packaging Lambda handlers: {handlers}")

    temp_dir = build_dir / f"temp_{PACKAGE_NAME}"
    if temp_dir.exists():
        shutil.rmtree(temp_dir)
    temp_dir.mkdir()

    shutil.copytree(
        package_dir,
        temp_dir / PACKAGE_NAME,
        ignore=shutil.ignore_patterns("__pycache__", "*.pyc"),
    )

    # Runtime dependencies only; boto3 is also provided by the Lambda runtime
    print("Installing dependencies...")
    subprocess.run([
        sys.executable, "-m", "pip", "install",
        str(project_root),
        "-t", str(temp_dir),
        "--no-compile",
    ], check=True)

    print(f"Creating {zip_path.name}...")
    with zipfile.ZipFile(zip_path, 'w', zipfile.ZIP_DEFLATED) as zipf:
        for root, _, files in os.walk(temp_dir):
            for file in files:
                file_path = Path(root) / file
                arcname = file_path.relative_to(temp_dir)
                zipf.write(file_path, arcname)

    shutil.rmtree(temp_dir)

    print(f"{zip_path.name} created ({zip_path.stat().st_size} bytes)")
    print("Build complete!")


if __name__ == "__main__":
    main()

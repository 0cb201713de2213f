from __future__ import annotations

COMPONENT_EXTENSION = ".tsx"
DATA_LAYER_FOLDERS = ("lib", "services", "api")


def normalize_path(path: str) -> str:
    return path.replace("\\", "/")


def is_in_folder(path: str, folder_name: str) -> bool:
    normalized = normalize_path(path)
    return f"/{folder_name}/" in normalized or normalized.startswith(f"{folder_name}/")


def is_in_any_folder(path: str, folder_names: tuple[str, ...]) -> bool:
    return any(is_in_folder(path, name) for name in folder_names)


def is_component_file(path: str) -> bool:
    return path.endswith(COMPONENT_EXTENSION)

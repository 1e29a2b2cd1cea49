# formularios/common/config_loader.py
import os
import sys
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

ROOT_MARKER = "pyproject.toml"


def find_project_root(start: Path) -> Optional[Path]:
    """Sube desde `start` hasta el primer directorio que contenga pyproject.toml."""
    for candidate in (start, *start.parents):
        if (candidate / ROOT_MARKER).exists():
            return candidate
    return None


class ConfigLoader:
    """
    Carga los .env de un servicio que renderiza formularios.
    Precedencia: variables del sistema > .env del servicio > .env del proyecto.
    """

    _initialized = False
    _project_root: Optional[Path] = None

    @classmethod
    def initialize_service(cls, service_name: str, project_root: Optional[Union[str, Path]] = None) -> None:
        """
        Inicializa la configuración una sola vez por proceso.

        Args:
            service_name: nombre del servicio; busca src/formularios/<servicio>/.env
            project_root: raíz explícita. Si no se pasa se usa FORMULARIOS_PROJECT_ROOT
                o se busca pyproject.toml desde este archivo.
        """
        if cls._initialized:
            return

        root = project_root or os.getenv("FORMULARIOS_PROJECT_ROOT")
        if root:
            cls._project_root = Path(root).resolve()
        else:
            cls._project_root = find_project_root(Path(__file__).resolve().parent)
        if cls._project_root is None:
            cls._project_root = Path.cwd()
            print(
                f"ADVERTENCIA CONFIG_LOADER: No se encontró '{ROOT_MARKER}'. "
                f"Se usa el directorio actual como raíz: {cls._project_root}",
                file=sys.stderr,
            )

        for env_path in cls._env_files(service_name):
            print(f"CONFIG_LOADER: Cargando {env_path}", file=sys.stderr)
            # override=False: las variables ya presentes en el entorno no se pisan
            load_dotenv(dotenv_path=env_path, override=False)

        cls._initialized = True
        os.environ["FORMULARIOS_CONFIG_INITIALIZED"] = "True"
        print(f"CONFIG_LOADER: Servicio '{service_name}' inicializado (root: {cls._project_root})", file=sys.stderr)

    @classmethod
    def _env_files(cls, service_name: str):
        """Archivos .env existentes, del más específico al más general."""
        candidates = [
            cls._project_root / "src" / "formularios" / service_name / ".env",
            cls._project_root / ".env",
        ]
        return [path for path in candidates if path.exists()]

    @classmethod
    def get_project_root(cls) -> Path:
        """Retorna la ruta raíz del proyecto."""
        if not cls._initialized:
            raise RuntimeError("ConfigLoader no ha sido inicializado. Llama a initialize_service() primero.")
        return cls._project_root

    @classmethod
    def is_initialized(cls) -> bool:
        return cls._initialized

    @classmethod
    def reset(cls) -> None:
        """Resetea el estado del ConfigLoader (útil para testing)."""
        cls._initialized = False
        cls._project_root = None
        os.environ.pop("FORMULARIOS_CONFIG_INITIALIZED", None)

from moibit.client.client import Client
from moibit.client.domain.filepath import FilePath

__all__ = ["Client", "FilePath"]

from typing import Annotated

from fastapi import Depends

from polysquare.core.config import Settings, get_settings


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

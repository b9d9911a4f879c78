from flyby.settings.flyby_settings import FlyBySettings


class FlyByClient:
    def __init__(self, settings: FlyBySettings | None = None):
        self.settings = settings if settings is not None else FlyBySettings()
        self._imagery = None

    @property
    def imagery(self):
        if self._imagery is None:
            from flyby.imagery.imagery import Imagery

            self._imagery = Imagery(self)
        return self._imagery

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        pass

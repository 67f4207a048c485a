from podman_api.opts.base import Field, Filter, JSON, JsonOpts, STR, UrlOpts


class VolumeListFilter(Filter):
    __slots__ = ()

    @classmethod
    def driver(cls, driver):
        return cls.make('driver', driver)

    @classmethod
    def name(cls, name):
        return cls.make('name', name)

    @classmethod
    def opt(cls, opt):
        return cls.make('opt', opt)

    @classmethod
    def until(cls, until):
        return cls.make('until', until)


class VolumeListOpts(UrlOpts):
    FILTER = VolumeListFilter


class VolumePruneFilter(Filter):
    __slots__ = ()

    @classmethod
    def until(cls, until):
        return cls.make('until', until)


class VolumePruneOpts(UrlOpts):
    FILTER = VolumePruneFilter


class VolumeCreateOpts(JsonOpts):
    FIELDS = {
        'driver': Field('Driver', STR),
        'labels': Field('Labels', JSON),
        'name': Field('Name', STR),
        'options': Field('Options', JSON),
    }

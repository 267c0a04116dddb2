from dataclasses import dataclass


@dataclass(frozen=True)
class CpuInfo:
    model: str
    speed_mhz: float

    @property
    def speed_ghz(self) -> float:
        return self.speed_mhz / 1000

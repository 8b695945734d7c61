"""topology summary"""

from dataclasses import dataclass, field

from serde import serialize

from ptbuilder.models import TopologySnapshot


@serialize(rename_all="camelcase")
@dataclass
class TopologySummary:
    """entity counts and device names of a snapshot"""

    counts: dict[str, int] = field(default_factory=dict)
    device_names: list[str] = field(default_factory=list)

    def describe(self) -> str:
        return ", ".join(f"{count} {name}" for name, count in self.counts.items())


def summarize(snapshot: TopologySnapshot) -> TopologySummary:
    return TopologySummary(
        counts={
            "devices": len(snapshot.devices),
            "modules": len(snapshot.modules),
            "links": len(snapshot.links),
            "pcIpConfigs": len(snapshot.pc_ip_configs),
            "iosConfigs": len(snapshot.ios_configs),
        },
        device_names=[device.name for device in snapshot.devices],
    )

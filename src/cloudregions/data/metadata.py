# src/cloudregions/data/metadata.py

"""
Freshness metadata for the bundled catalog. `sources` lists the page each
provider's regions were transcribed from; the same pages are watched by
`cloudregions.freshness`.
"""

DATA_METADATA = {
    "lastUpdated": "2026-01-21",
    "version": "0.1.0",
    "totalRegions": 0,
    "totalProviders": 0,
    "sources": {
        "aws": "https://aws.amazon.com/about-aws/global-infrastructure/regions_az/",
        "azure": "https://learn.microsoft.com/en-us/azure/reliability/regions-list",
        "gcp": "https://cloud.google.com/about/locations",
        "oci": "https://oracle.com/cloud/public-cloud-regions/",
        "digitalocean": "https://docs.digitalocean.com/platform/regional-availability/",
        "paperspace": "https://docs.digitalocean.com/products/paperspace/platform-overview/availability/",
        "hetzner": "https://docs.hetzner.com/cloud/general/locations/",
        "vultr": "https://www.vultr.com/features/datacenter-locations/",
        "linode": "https://www.linode.com/global-infrastructure/",
        "ovh": "https://www.ovhcloud.com/en/about-us/global-infrastructure/",
        "scaleway": "https://www.scaleway.com/en/docs/console/account/reference-content/products-availability/",
        "coreweave": "https://docs.coreweave.com/data-centers",
        "crusoe": "https://www.crusoe.ai/cloud/",
        "lambda": "https://lambdalabs.com/service/gpu-cloud",
    },
}

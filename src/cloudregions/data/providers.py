# src/cloudregions/data/providers.py

"""
Static table of the cloud providers covered by the bundled region catalog.

Sources are listed per provider in `cloudregions.data.metadata.DATA_METADATA`.
"""

PROVIDERS = [
    # --- Hyperscalers ---
    {
        "id": "aws",
        "name": "Amazon Web Services",
        "tier": "hyperscaler",
        "website": "https://aws.amazon.com",
        "regionDocsUrl": "https://aws.amazon.com/about-aws/global-infrastructure/regions_az/",
        "statusPageUrl": "https://health.aws.amazon.com/health/status",
        "description": "The largest public cloud provider by market share.",
        "specialization": ["general-purpose", "enterprise", "government"],
    },
    {
        "id": "azure",
        "name": "Microsoft Azure",
        "tier": "hyperscaler",
        "website": "https://azure.microsoft.com",
        "regionDocsUrl": "https://learn.microsoft.com/en-us/azure/reliability/regions-list",
        "statusPageUrl": "https://azure.status.microsoft/en-us/status",
        "description": "Microsoft's public cloud, with the widest regional footprint among hyperscalers.",
        "specialization": ["general-purpose", "enterprise", "government"],
    },
    {
        "id": "gcp",
        "name": "Google Cloud Platform",
        "tier": "hyperscaler",
        "website": "https://cloud.google.com",
        "regionDocsUrl": "https://cloud.google.com/about/locations",
        "statusPageUrl": "https://status.cloud.google.com",
        "description": "Google's public cloud, known for data analytics, TPUs and carbon-free energy goals.",
        "specialization": ["general-purpose", "data-analytics", "ai-ml"],
    },
    {
        "id": "oci",
        "name": "Oracle Cloud Infrastructure",
        "tier": "hyperscaler",
        "website": "https://www.oracle.com/cloud/",
        "regionDocsUrl": "https://www.oracle.com/cloud/public-cloud-regions/",
        "statusPageUrl": "https://ocistatus.oraclecloud.com",
        "description": "Oracle's public cloud, including multicloud database offerings hosted in other clouds.",
        "specialization": ["databases", "enterprise", "multicloud"],
    },
    # --- Major providers ---
    {
        "id": "digitalocean",
        "name": "DigitalOcean",
        "tier": "major",
        "website": "https://www.digitalocean.com",
        "regionDocsUrl": "https://docs.digitalocean.com/platform/regional-availability/",
        "statusPageUrl": "https://status.digitalocean.com",
        "description": "Developer-focused cloud with simple pricing.",
        "specialization": ["developers", "smb"],
    },
    {
        "id": "linode",
        "name": "Akamai Cloud (Linode)",
        "tier": "major",
        "website": "https://www.linode.com",
        "regionDocsUrl": "https://www.linode.com/global-infrastructure/",
        "statusPageUrl": "https://status.linode.com",
        "description": "Akamai's compute platform, formerly Linode.",
        "specialization": ["developers", "edge"],
    },
    {
        "id": "vultr",
        "name": "Vultr",
        "tier": "major",
        "website": "https://www.vultr.com",
        "regionDocsUrl": "https://www.vultr.com/features/datacenter-locations/",
        "statusPageUrl": "https://status.vultr.com",
        "description": "Independent cloud with a broad global footprint and GPU offerings.",
        "specialization": ["developers", "gpu"],
    },
    # --- Specialized providers ---
    {
        "id": "crusoe",
        "name": "Crusoe Cloud",
        "tier": "specialized",
        "website": "https://www.crusoe.ai",
        "regionDocsUrl": "https://www.crusoe.ai/cloud/",
        "description": "AI cloud powered by stranded and renewable energy.",
        "specialization": ["gpu", "ai-ml", "sustainability"],
    },
    {
        "id": "coreweave",
        "name": "CoreWeave",
        "tier": "specialized",
        "website": "https://www.coreweave.com",
        "regionDocsUrl": "https://docs.coreweave.com/data-centers",
        "statusPageUrl": "https://status.coreweave.com",
        "description": "GPU-specialized cloud for AI training and inference.",
        "specialization": ["gpu", "ai-ml"],
    },
    {
        "id": "lambda",
        "name": "Lambda",
        "tier": "specialized",
        "website": "https://lambdalabs.com",
        "regionDocsUrl": "https://lambdalabs.com/service/gpu-cloud",
        "description": "GPU cloud focused on deep learning workloads.",
        "specialization": ["gpu", "ai-ml"],
    },
    {
        "id": "paperspace",
        "name": "Paperspace",
        "tier": "specialized",
        "website": "https://www.paperspace.com",
        "regionDocsUrl": "https://docs.digitalocean.com/products/paperspace/platform-overview/availability/",
        "description": "GPU cloud operated by DigitalOcean.",
        "specialization": ["gpu", "ai-ml"],
    },
    # --- Regional providers ---
    {
        "id": "ovh",
        "name": "OVHcloud",
        "tier": "regional",
        "website": "https://www.ovhcloud.com",
        "regionDocsUrl": "https://www.ovhcloud.com/en/about-us/global-infrastructure/",
        "statusPageUrl": "https://www.status-ovhcloud.com",
        "description": "European cloud provider with water-cooled data centers.",
        "specialization": ["european-sovereignty", "bare-metal"],
    },
    {
        "id": "hetzner",
        "name": "Hetzner",
        "tier": "regional",
        "website": "https://www.hetzner.com",
        "regionDocsUrl": "https://docs.hetzner.com/cloud/general/locations/",
        "statusPageUrl": "https://status.hetzner.com",
        "description": "German hosting provider with low-cost cloud servers.",
        "specialization": ["cost-efficiency", "bare-metal"],
    },
    {
        "id": "scaleway",
        "name": "Scaleway",
        "tier": "regional",
        "website": "https://www.scaleway.com",
        "regionDocsUrl": "https://www.scaleway.com/en/docs/console/account/reference-content/products-availability/",
        "statusPageUrl": "https://status.scaleway.com",
        "description": "French cloud provider with a sovereignty and sustainability focus.",
        "specialization": ["european-sovereignty", "gpu", "sustainability"],
    },
]

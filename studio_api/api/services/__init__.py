# Service classes sit between routers and the studio store.
# They resolve list filters and shape stored records into response payloads.

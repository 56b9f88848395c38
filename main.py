from pdnsprovider import ResourceData, ZoneConfiguration, client_factory, resource_factory



def main():
    # Example usage: import an existing zone, then change its kind
    config = {
        "server_url": "http://localhost:8081",
        "api_key": "secret",
    }

    client = client_factory(config)
    zone = resource_factory("powerdns_zone")

    data = ResourceData(id='{"name": "example.com."}')
    [imported] = zone.import_state(data, client)
    print(f"Imported: {imported}")

    prior = imported.config.model_copy()
    planned = ResourceData(
        ZoneConfiguration(name=prior.name, kind="Master", nameservers=prior.nameservers),
        prior=prior,
        id=imported.id,
    )
    zone.update(planned, client)
    zone.read(planned, client)
    print(f"Updated: {planned}")

if __name__ == "__main__":
    main()

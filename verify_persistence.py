import sys
import logging

from parcel_tracker.app.core.config import settings
from parcel_tracker.app.core.exceptions import NotFound
from parcel_tracker.app.db.session import open_engine
from parcel_tracker.app.models.parcel_enums import ParcelStatus
from parcel_tracker.app.services.parcel_service import ParcelService
from parcel_tracker.app.services.parcel_store import ParcelStore

CLIENT_ID = 1
ADDRESS = "Pskov, Lenina 5"
NEW_ADDRESS = "Psk, Lenina 5"


def run_verification(database_url):
    # 1. Register a parcel (First Run)
    print(f"\n--- [Step 1] Registering Parcel in {database_url} ---")
    with open_engine(database_url) as engine:
        service = ParcelService(ParcelStore(engine))
        parcel = service.register(CLIENT_ID, ADDRESS)
        print(f"✅ Parcel № {parcel.number} registered at {parcel.created_at}")

        service.change_address(parcel.number, NEW_ADDRESS)
        print(f"✅ Address change requested: {NEW_ADDRESS}")

        service.next_status(parcel.number)
        print("✅ Parcel moved forward")

    # 2. Reopen (Verification)
    print("\n--- [Step 2] Reopening Database (Persistence Test) ---")
    with open_engine(database_url) as engine:
        store = ParcelStore(engine)
        service = ParcelService(store)

        stored = store.get(parcel.number)
        if stored.address != NEW_ADDRESS or stored.status != ParcelStatus.SENT:
            print(f"❌ Parcel Not Persisted: {stored}")
            raise Exception("Persistence check failed")
        print(f"✅ Parcel Persisted: {stored.status.value}, {stored.address}")

        # 3. Guards
        print("\n--- [Step 3] Checking Guards ---")
        service.delete(parcel.number)
        store.get(parcel.number)
        print("✅ Sent parcel survived delete")

        extra = service.register(CLIENT_ID, ADDRESS)
        service.delete(extra.number)
        try:
            store.get(extra.number)
            raise Exception("Registered parcel was not deleted")
        except NotFound:
            print("✅ Registered parcel deleted")

        # 4. Client listing
        print("\n--- [Step 4] Client Parcels ---")
        for p in service.client_parcels(CLIENT_ID):
            print(f"  № {p.number}: {p.address}, {p.status.value}, {p.created_at}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_verification(sys.argv[1] if len(sys.argv) > 1 else settings.database_url)

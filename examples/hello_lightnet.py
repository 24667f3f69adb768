import time

import lightnet
from lightnet.config import setup_logging


def main() -> None:
    setup_logging("info")

    server = lightnet.run(port=0, new_server=True)
    print("Serving at", server.url)
    time.sleep(0.5)

    deployer = server.client("ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM")
    wallet = server.client("ST1SJ3DTE5DN7X54YDH5D64R3BCB6A2AG2ZQ8YPD5")

    deployer.register("HomeNet", "Living room", 12)
    print("details:", deployer.get())

    try:
        deployer.register("HomeNet", "Living room", 12)
    except lightnet.AlreadyExistsError as e:
        print("second register:", e.code, e)

    try:
        wallet.update("Hijack", "Elsewhere", 0, network=deployer.caller)
    except lightnet.UnauthorizedError as e:
        print("foreign update:", e.code, e)

    deployer.update("HomeNet", "Office", 20)
    print("after update:", deployer.get())
    print("total networks:", deployer.total())


if __name__ == "__main__":
    main()

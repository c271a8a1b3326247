from enumkit import KitEnum, enums


class Flags(KitEnum, sentinel="FlagsN"):
    IsField = 0
    HasKiFields = 1
    HasNoKiFields = 2
    Updating = 3
    OnlySelfUpdate = 4
    NodeAdded = 5
    NodeCopied = 6
    NodeMoved = 7
    NodeDeleted = 8
    NodeDestroyed = 9
    ChildAdded = 10
    ChildMoved = 11
    ChildDeleted = 12
    ChildrenDeleted = 13
    FieldUpdated = 14
    PropUpdated = 15
    FlagsN = 16


KiT_Flags = enums.register(Flags, bit_flag=True)
